"""
Client API for Timeweb Cloud AI agents.
"""

from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode
from .ClientConfig import ClientConfig, BASE_URL
from .RequestTypes import CallAgentRequest, ChatCompletionRequest, RequestBody, to_payload
from .ChatCompletion import ChatCompletion
from .AgentInstance import AgentInstance
from .multimodal import ImageInput, DEFAULT_AUDIO_PROMPT, build_image_request, build_audio_request
from .transport import Transport, RequestsTransport
from .errors import (
	TimewebError, ConfigurationError, NetworkError, ResponseReadError,
	APIError, InvalidResponseError, EmbedFetchError
)
import warnings
import logging
import json

logger = logging.getLogger(__name__)

def _param_str(value:Any) -> str:
	if isinstance(value, bool):
		return "true" if value else "false"
	return str(value)

def build_url(agent_access_id:str, path:str, params:Optional[Mapping[str, Any]]=None) -> str:
	'''
	Url of an agent endpoint, query parameters sorted by key.
	'''
	url = f"{BASE_URL}/agents/{agent_access_id}{path}"
	if params:
		url += "?" + urlencode([(k, _param_str(params[k])) for k in sorted(params)])
	return url

def _serialize(body:Any) -> str:
	try:
		return json.dumps(to_payload(body))
	except (TypeError, ValueError) as e:
		raise ConfigurationError(f"Request body is not JSON serializable: {e}") from e

def _parse_error_body(text:str) -> Any:
	if not text:
		return {}
	try:
		return json.loads(text)
	except ValueError:
		return {"raw": text}

class TimewebCloudAIClient:
	'''
	Client for the Timeweb Cloud AI agent API.

	Needs an access token and an identifier of the calling application
	(sent as x-proxy-source).

	Example:
		client = TimewebCloudAIClient("your_token", "my-app")
		response = client.call("agt_xxx", {"message": "Hi!"})

		# or bound to one agent:
		agent = client.agent("agt_xxx")
		response = agent.call({"message": "Hi!"})
	'''

	def __init__(self, access_token:str, proxy_source:str, transport:Optional[Transport]=None):
		"""
		Initialize the client. No request is made here.

		Args:
			access_token: Bearer token of the Timeweb account
			proxy_source: Identifier of the calling application
			transport: Transport to send requests with, RequestsTransport if None
		"""
		self.config = ClientConfig(access_token=access_token, proxy_source=proxy_source)
		self.transport = transport or RequestsTransport()

	@classmethod
	def from_env(cls, transport:Optional[Transport]=None) -> 'TimewebCloudAIClient':
		'''Client configured from TIMEWEB_AI_TOKEN and TIMEWEB_PROXY_SOURCE.'''
		config = ClientConfig.from_env()
		return cls(config.access_token, config.proxy_source, transport=transport)

	def _send(self, method:str, url:str, headers:Dict[str, str], body:Optional[str]=None) -> Any:
		try:
			return self.transport.request(method, url, headers, body)
		except TimewebError:
			raise
		except Exception as e:
			raise NetworkError(f"Network error: {e}", e) from e

	def _request(
			self,
			method:str,
			path:str,
			params:Optional[Mapping[str, Any]]=None,
			body:Optional[RequestBody]=None,
			agent_access_id:Optional[str]=None
			) -> Any:
		'''
		Send one request to an agent endpoint and return the parsed JSON.

		Raises:
			ConfigurationError: agent_access_id is empty (nothing is sent)
				or the body cannot be serialized
			NetworkError: the transport failed
			ResponseReadError: the response body could not be read
			APIError: the status was not 2xx
			InvalidResponseError: a 2xx response was not valid JSON
		'''
		if not agent_access_id:
			raise ConfigurationError("agent_access_id is required for all requests")

		url = build_url(agent_access_id, path, params)
		headers = {
			**self.config.auth_headers,
			"Content-Type": "application/json",
		}
		data = _serialize(body) if body is not None else None

		logger.debug("%s %s", method, url)
		response = self._send(method, url, headers, data)

		try:
			text = response.text()
		except Exception as e:
			raise ResponseReadError(cause=e) from e
		logger.debug("%s %s -> %s", method, url, response.status)

		if not 200 <= response.status < 300:
			raise APIError(
				response.status,
				_parse_error_body(text),
				f"Timeweb API error {response.status}: {text or 'no response body'}"
			)

		if not text:
			return {}
		try:
			return json.loads(text)
		except ValueError as e:
			raise InvalidResponseError("Invalid JSON response from Timeweb API", text) from e

	def call(self, agent_access_id:str, payload:CallAgentRequest|Mapping[str, Any]) -> Dict[str, Any]:
		"""
		Send a message (and or files) to an agent through the simplified /call endpoint.

		Args:
			agent_access_id: Id of the agent (starts with agt_)
			payload: Message, parent_message_id and file_ids

		Returns:
			The agent response, {id, message, finish_reason}
		"""
		return self._request("POST", "/call", body=payload, agent_access_id=agent_access_id)

	def chat_completions(self, agent_access_id:str, payload:ChatCompletionRequest|Mapping[str, Any]) -> Dict[str, Any]:
		"""
		OpenAI compatible chat completion.

		Args:
			agent_access_id: Id of the agent
			payload: Request in the OpenAI Chat Completions format

		Returns:
			The response in the OpenAI format, see ChatCompletion for a wrapper
		"""
		return self._request("POST", "/v1/chat/completions", body=payload, agent_access_id=agent_access_id)

	def get_models(self, agent_access_id:str) -> Dict[str, Any]:
		"""
		List the models available to an agent.

		Returns:
			{"object": "list", "data": [{"id": ...}, ...]}
		"""
		return self._request("GET", "/v1/models", agent_access_id=agent_access_id)

	def get_embed_script(
			self,
			agent_access_id:str,
			referer_domain:str="",
			origin_domain:str="",
			collapsed:bool=True
			) -> str:
		'''
		Fetch the javascript of the agent's web widget.

		The endpoint only answers requests coming from a browser on an
		allowed domain, elsewhere expect a 403. Neither the token nor the
		proxy source are sent and the script is returned as is.

		Raises:
			EmbedFetchError: the status was not 2xx
		'''
		if not agent_access_id:
			raise ConfigurationError("agent_access_id is required for all requests")
		warnings.warn(
			"get_embed_script is meant for browser contexts and usually fails server side",
			DeprecationWarning,
			stacklevel=2
		)
		url = build_url(agent_access_id, "/embed.js", {"collapsed": collapsed})
		headers = {
			"referer": referer_domain,
			"origin": origin_domain,
		}
		logger.debug("GET %s", url)
		response = self._send("GET", url, headers)
		if not 200 <= response.status < 300:
			response.close()
			raise EmbedFetchError(response.status)
		try:
			return response.text()
		except Exception as e:
			raise ResponseReadError(cause=e) from e

	def chat_with_image(
			self,
			agent_access_id:str,
			image:ImageInput,
			text:str="",
			mime_type:Optional[str]=None,
			max_tokens:Optional[int]=None,
			temperature:Optional[float]=None
			) -> ChatCompletion:
		'''
		Ask about an image given as bytes, a file path or a data url.

		The mime type of bytes and files is sniffed (JPEG or PNG) unless
		mime_type is given.
		'''
		payload = build_image_request(image, text, mime_type, max_tokens, temperature)
		return ChatCompletion(self.chat_completions(agent_access_id, payload))

	def chat_with_audio(
			self,
			agent_access_id:str,
			audio:str,
			text:str=DEFAULT_AUDIO_PROMPT,
			max_tokens:Optional[int]=None,
			temperature:Optional[float]=None
			) -> ChatCompletion:
		'''
		Send a base64 encoded WAV clip (16kHz, mono) together with text.
		'''
		payload = build_audio_request(audio, text, max_tokens, temperature)
		return ChatCompletion(self.chat_completions(agent_access_id, payload))

	def agent(self, agent_access_id:str) -> AgentInstance:
		'''
		Bind this client to one agent so the id need not be passed to every call.

		Example:
			agent = client.agent("agt_xxx")
			response = agent.call({"message": "Hi!"})
		'''
		return AgentInstance(self, agent_access_id)

	def close(self) -> None:
		self.transport.close()

	def __enter__(self) -> 'TimewebCloudAIClient':
		return self

	def __exit__(self, *exc) -> None:
		self.close()
