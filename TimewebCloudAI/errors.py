"""
Exception types raised by the Timeweb Cloud AI client.
"""

from typing import Any, Optional

class TimewebError(Exception):
	"""Base class for every error raised by this package."""

class ConfigurationError(TimewebError):
	'''
	Missing or empty configuration (access token, proxy source,
	agent id) or an unusable multimodal input.
	'''

class NetworkError(TimewebError):
	"""The transport could not reach the API."""
	def __init__(self, message:str, cause:Optional[BaseException]=None):
		self.cause = cause
		super().__init__(message)

class ResponseReadError(TimewebError):
	"""The request went through but the response body could not be read."""
	def __init__(self, message:str="Failed to read response body", cause:Optional[BaseException]=None):
		self.cause = cause
		super().__init__(message)

class APIError(TimewebError):
	'''
	The API answered with a non 2xx status.
	
	body holds the parsed JSON error body, or {"raw": text} when the
	body was not JSON.
	'''
	def __init__(self, status:int, body:Any, message:str):
		self.status = status
		self.body = body
		super().__init__(message)
	
	def to_dict(self) -> dict:
		return {"status": self.status, "body": self.body, "message": str(self)}

class InvalidResponseError(TimewebError):
	"""A successful status came back with a body that is not valid JSON."""
	def __init__(self, message:str, text:str=""):
		self.text = text
		super().__init__(message)

class EmbedFetchError(TimewebError):
	"""The embed script endpoint answered with a non 2xx status."""
	def __init__(self, status:int):
		self.status = status
		super().__init__(f"Failed to fetch embed script ({status})")
