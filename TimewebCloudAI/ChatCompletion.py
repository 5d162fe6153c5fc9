from typing import Any, Dict, Optional
from .helpers import get_msg, get_msg_content, get_finish_reason

class ChatCompletion:
	'''
	Read only view over a parsed /v1/chat/completions response.

	Missing fields never raise, they read as "" or None.
	The wrapped dict is never modified.
	'''

	def __init__(self, raw_response:Dict[str, Any]):
		self._raw_response = raw_response

	@property
	def text(self) -> str:
		'''Content of the first choice, stripped of surrounding whitespace.'''
		return get_msg_content(self._raw_response).strip()

	@property
	def raw(self) -> Dict[str, Any]:
		'''The response exactly as the API returned it.'''
		return self._raw_response

	@property
	def usage(self) -> Optional[Dict[str, int]]:
		'''prompt_tokens, completion_tokens and total_tokens, if the API sent them.'''
		return self._get('usage')

	@property
	def id(self) -> Optional[str]:
		return self._get('id')

	@property
	def model(self) -> Optional[str]:
		return self._get('model')

	@property
	def message(self) -> Optional[Dict[str, Any]]:
		return get_msg(self._raw_response)

	@property
	def finish_reason(self) -> Optional[str]:
		return get_finish_reason(self._raw_response)

	def _get(self, key:str) -> Any:
		if not isinstance(self._raw_response, dict):
			return None
		return self._raw_response.get(key)

	def __str__(self) -> str:
		return self.text

	def __repr__(self) -> str:
		return f"ChatCompletion(id={self.id!r}, text={self.text!r})"
