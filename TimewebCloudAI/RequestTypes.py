"""
Request bodies understood by the agent endpoints.

Optional fields left as None are left out of the serialized body.
"""

from typing import Any, Dict, List, Mapping, Optional, Union
from dataclasses import dataclass, field, is_dataclass
from dataclasses_json import dataclass_json, config
from .errors import ConfigurationError

CHAT_ROLES = ("user", "assistant", "system")
AUDIO_FORMATS = ("wav", "mp3")

def _is_none(value:Any) -> bool:
	return value is None

def optional(default:Any=None, **kwargs) -> Any:
	'''A field that is dropped from to_dict() while it is None.'''
	return field(default=default, metadata=config(exclude=_is_none, **kwargs))

@dataclass_json
@dataclass
class CallAgentRequest:
	'''Body of the simplified /call endpoint.'''
	message: Optional[str] = optional()
	parent_message_id: Optional[str] = optional()
	'''Id of a previous message to continue the conversation from.'''
	file_ids: Optional[List[str]] = optional()

@dataclass_json
@dataclass
class TextPart:
	type: str = field(default="text", init=False)
	text: str = ""

@dataclass_json
@dataclass
class ImageURL:
	url: str
	'''Http(s) url or data url of the image.'''

@dataclass_json
@dataclass
class ImagePart:
	type: str = field(default="image_url", init=False)
	image_url: Optional[ImageURL] = None

@dataclass_json
@dataclass
class InputAudio:
	base64_audio: str = field(metadata=config(field_name="base64Audio"))
	format: str = "wav"

	def __post_init__(self):
		if self.format not in AUDIO_FORMATS:
			raise ConfigurationError(f"Unsupported audio format '{self.format}', expected one of {AUDIO_FORMATS}")

@dataclass_json
@dataclass
class AudioPart:
	type: str = field(default="input_audio", init=False)
	input_audio: Optional[InputAudio] = None

ContentPart = Union[TextPart, ImagePart, AudioPart]

@dataclass_json
@dataclass
class ChatMessage:
	role: str
	content: Union[str, List[ContentPart]]

	def __post_init__(self):
		if self.role not in CHAT_ROLES:
			raise ConfigurationError(f"Unknown chat role '{self.role}', expected one of {CHAT_ROLES}")

@dataclass_json
@dataclass
class ChatCompletionRequest:
	'''
	Body of the OpenAI compatible /v1/chat/completions endpoint.

	stream is passed through as is, the response body is always read whole.
	'''
	messages: List[ChatMessage] = field(default_factory=list)
	model: Optional[str] = optional()
	temperature: Optional[float] = optional()
	max_tokens: Optional[int] = optional()
	max_completion_tokens: Optional[int] = optional()
	stream: Optional[bool] = optional()

RequestBody = Union[CallAgentRequest, ChatCompletionRequest, Mapping[str, Any]]

def to_payload(value:Any) -> Any:
	'''
	Converts a request, or a mapping or list holding request dataclasses
	at any depth, into json ready dicts and lists.

	Anything else is returned unchanged.
	'''
	if is_dataclass(value) and not isinstance(value, type) and hasattr(value, 'to_dict'):
		return value.to_dict()
	if isinstance(value, Mapping):
		return {k: to_payload(v) for k, v in value.items()}
	if isinstance(value, (list, tuple)):
		return [to_payload(v) for v in value]
	return value
