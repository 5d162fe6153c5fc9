"""
Builders for chat completion requests that carry an image or audio clip.
"""

from typing import Optional, Union
from .RequestTypes import (
	ChatCompletionRequest, ChatMessage,
	TextPart, ImagePart, ImageURL, AudioPart, InputAudio
)
from .errors import ConfigurationError
import base64
import os

JPEG_MIME = "image/jpeg"
PNG_MIME = "image/png"

_JPEG_SIGNATURE = b"\xff\xd8"
_PNG_SIGNATURE = b"\x89PNG"

DEFAULT_AUDIO_PROMPT = "Transcribe the audio."

ImageInput = Union[bytes, bytearray, memoryview, str, os.PathLike]

def detect_mime_type(data:bytes) -> str:
	'''
	Guess an image mime type from its leading bytes.

	Only JPEG and PNG are recognized, anything else is reported as
	JPEG. Pass a mime type explicitly for other formats (eg. webp).
	'''
	data = bytes(data[:4])
	if data.startswith(_JPEG_SIGNATURE):
		return JPEG_MIME
	if data.startswith(_PNG_SIGNATURE):
		return PNG_MIME
	return JPEG_MIME

def is_data_url(value:str) -> bool:
	return value.startswith("data:") or ";base64," in value

def encode_data_url(data:bytes, mime_type:Optional[str]=None) -> str:
	mime_type = mime_type or detect_mime_type(data)
	return f"data:{mime_type};base64,{base64.b64encode(bytes(data)).decode('ascii')}"

def _read_image_file(path:Union[str, os.PathLike]) -> bytes:
	try:
		with open(path, 'rb') as f:
			return f.read()
	except OSError as e:
		raise ConfigurationError(f"Could not read image file '{os.fspath(path)}': {e}") from e

def image_to_data_url(image:ImageInput, mime_type:Optional[str]=None) -> str:
	'''
	Turn an image into a data url.

	Args:
		image: Raw image bytes, a path to an image file, or a string that
			already is a data url (returned unchanged)
		mime_type: Overrides the sniffed mime type for bytes and files

	Returns:
		A data url usable as an image_url
	'''
	if isinstance(image, (bytes, bytearray, memoryview)):
		return encode_data_url(image, mime_type)
	if isinstance(image, str):
		if is_data_url(image):
			return image
		return encode_data_url(_read_image_file(image), mime_type)
	if isinstance(image, os.PathLike):
		return encode_data_url(_read_image_file(image), mime_type)
	raise ConfigurationError(f"Unsupported image input of type '{type(image).__name__}', expected bytes, a file path or a data url")

def build_image_request(
		image:ImageInput,
		text:str="",
		mime_type:Optional[str]=None,
		max_tokens:Optional[int]=None,
		temperature:Optional[float]=None
		) -> ChatCompletionRequest:
	'''
	A single user message holding text followed by an image.
	'''
	return ChatCompletionRequest(
		messages=[
			ChatMessage(role="user", content=[
				TextPart(text=text),
				ImagePart(image_url=ImageURL(url=image_to_data_url(image, mime_type))),
			])
		],
		max_tokens=max_tokens,
		temperature=temperature
	)

def build_audio_request(
		audio:str,
		text:str=DEFAULT_AUDIO_PROMPT,
		max_tokens:Optional[int]=None,
		temperature:Optional[float]=None
		) -> ChatCompletionRequest:
	'''
	A single user message holding text followed by a WAV clip.

	Args:
		audio: Base64 encoded WAV data (16kHz mono is what the API expects)
		text: Instruction sent with the clip
	'''
	if not isinstance(audio, str) or not audio:
		raise ConfigurationError("audio must be a non-empty base64 encoded WAV string")
	return ChatCompletionRequest(
		messages=[
			ChatMessage(role="user", content=[
				TextPart(text=text),
				AudioPart(input_audio=InputAudio(base64_audio=audio, format="wav")),
			])
		],
		max_tokens=max_tokens,
		temperature=temperature
	)
