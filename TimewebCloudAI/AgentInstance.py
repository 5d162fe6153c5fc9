from typing import Any, Dict, Mapping, Optional, TYPE_CHECKING
from .RequestTypes import CallAgentRequest, ChatCompletionRequest
from .ChatCompletion import ChatCompletion
from .multimodal import ImageInput, DEFAULT_AUDIO_PROMPT

if TYPE_CHECKING:
	from .client import TimewebCloudAIClient

class AgentInstance:
	'''
	A client bound to one agent id.

	Every method forwards to the same named TimewebCloudAIClient method
	with agent_access_id filled in. Get one from client.agent(...).
	'''

	def __init__(self, client:'TimewebCloudAIClient', agent_access_id:str):
		self.client = client
		self.agent_access_id = agent_access_id

	def call(self, payload:CallAgentRequest|Mapping[str, Any]) -> Dict[str, Any]:
		"""Send a message through the simplified /call endpoint."""
		return self.client.call(self.agent_access_id, payload)

	def chat_completions(self, payload:ChatCompletionRequest|Mapping[str, Any]) -> Dict[str, Any]:
		"""OpenAI compatible chat completion, returns the raw response dict."""
		return self.client.chat_completions(self.agent_access_id, payload)

	def complete(self, payload:ChatCompletionRequest|Mapping[str, Any]) -> ChatCompletion:
		"""Like chat_completions, but wrapped in a ChatCompletion."""
		return ChatCompletion(self.chat_completions(payload))

	def get_models(self) -> Dict[str, Any]:
		"""Models available to this agent."""
		return self.client.get_models(self.agent_access_id)

	def get_embed_script(self, referer_domain:str="", origin_domain:str="", collapsed:bool=True) -> str:
		return self.client.get_embed_script(self.agent_access_id, referer_domain, origin_domain, collapsed)

	def chat_with_image(
			self,
			image:ImageInput,
			text:str="",
			mime_type:Optional[str]=None,
			max_tokens:Optional[int]=None,
			temperature:Optional[float]=None
			) -> ChatCompletion:
		'''
		Send text and an image (bytes, a file path or a data url).
		'''
		return self.client.chat_with_image(self.agent_access_id, image, text, mime_type, max_tokens, temperature)

	def chat_with_audio(
			self,
			audio:str,
			text:str=DEFAULT_AUDIO_PROMPT,
			max_tokens:Optional[int]=None,
			temperature:Optional[float]=None
			) -> ChatCompletion:
		'''
		Send text and a base64 encoded WAV clip.
		'''
		return self.client.chat_with_audio(self.agent_access_id, audio, text, max_tokens, temperature)

	def __repr__(self) -> str:
		return f"AgentInstance(agent_access_id={self.agent_access_id!r})"
