from dataclasses import dataclass, field
from typing import Dict
from .errors import ConfigurationError
import os

BASE_URL = "https://agent.timeweb.cloud/api/v1/cloud-ai"
'''Base url of the Timeweb Cloud AI API, see https://agent.timeweb.cloud/docs'''

PROXY_SOURCE_HEADER = "x-proxy-source"

DEFAULT_TOKEN_ENV = "TIMEWEB_AI_TOKEN"
DEFAULT_PROXY_SOURCE_ENV = "TIMEWEB_PROXY_SOURCE"

@dataclass(frozen=True)
class ClientConfig:
	'''
	Credentials sent with every agent request.

	Both values are required, construction fails if either is empty.
	'''

	access_token: str = field(repr=False)
	'''Bearer token for the Authorization header.'''

	proxy_source: str
	'''Identifier of the calling application, sent as the x-proxy-source header.'''

	def __post_init__(self):
		if not self.access_token:
			raise ConfigurationError("accessToken is required")
		if not self.proxy_source:
			raise ConfigurationError("proxySource is required")

	@staticmethod
	def from_env(token_env:str=DEFAULT_TOKEN_ENV, proxy_source_env:str=DEFAULT_PROXY_SOURCE_ENV) -> 'ClientConfig':
		'''
		Build a config from environment variables.

		Raises ConfigurationError if either variable is unset or empty.
		'''
		return ClientConfig(
			access_token=os.environ.get(token_env, ""),
			proxy_source=os.environ.get(proxy_source_env, "")
		)

	@property
	def auth_headers(self) -> Dict[str, str]:
		return {
			"Authorization": f"Bearer {self.access_token}",
			PROXY_SOURCE_HEADER: self.proxy_source,
		}
