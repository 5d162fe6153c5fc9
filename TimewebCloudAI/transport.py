"""
HTTP transport used by TimewebCloudAIClient.

The client never talks to the network directly, it hands a fully built
request to a Transport. Tests (or callers with special needs) can pass
their own Transport instead of the default requests based one.
"""

from typing import Dict, Optional, Protocol
import requests

class TransportResponse(Protocol):
	status: int
	
	def text(self) -> str:
		"""Drain and decode the response body."""
		...

	def close(self) -> None:
		"""Release the connection without reading the body."""
		...

class Transport:
	"""Performs a single HTTP request."""
	
	def request(self, method:str, url:str, headers:Dict[str,str], body:Optional[str]=None) -> TransportResponse:
		"""
		Send one request.
		
		Args:
			method: HTTP method, eg. GET or POST
			url: Absolute url including any query string
			headers: Request headers
			body: Serialized request body, or None to send no body
			
		Returns:
			A response whose body has not necessarily been read yet
		"""
		raise NotImplementedError("Subclasses must implement this method")
	
	def close(self) -> None:
		pass

class RequestsResponse:
	"""TransportResponse over a streamed requests.Response."""
	
	def __init__(self, response:requests.Response):
		self._response = response
		self.status = response.status_code
	
	def text(self) -> str:
		# JSON bodies without a charset are utf-8
		if self._response.encoding is None:
			self._response.encoding = 'utf-8'
		try:
			return self._response.text
		finally:
			self._response.close()

	def close(self) -> None:
		self._response.close()

class RequestsTransport(Transport):
	"""Default transport, backed by a requests.Session."""
	
	def __init__(self, session:Optional[requests.Session]=None, timeout:Optional[float]=None):
		'''
		Args:
			session: Session to send requests with, a new one is made if None
			timeout: Optional timeout in seconds passed to every request
		'''
		self.session = session or requests.Session()
		self.timeout = timeout
	
	def request(self, method:str, url:str, headers:Dict[str,str], body:Optional[str]=None) -> RequestsResponse:
		data = body.encode('utf-8') if body is not None else None
		# stream=True leaves the body unread so read failures surface from text()
		response = self.session.request(method, url, headers=headers, data=data, timeout=self.timeout, stream=True)
		return RequestsResponse(response)
	
	def close(self) -> None:
		self.session.close()
	
	def __enter__(self) -> 'RequestsTransport':
		return self
	
	def __exit__(self, *exc) -> None:
		self.close()
