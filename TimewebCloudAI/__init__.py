"""
TimewebCloudAI - A client for Timeweb Cloud AI agents.
"""

__version__ = "0.1.0"

from .client import TimewebCloudAIClient, build_url
from .AgentInstance import AgentInstance
from .ChatCompletion import ChatCompletion
from .ClientConfig import ClientConfig, BASE_URL
from .RequestTypes import (
	CallAgentRequest,
	ChatCompletionRequest,
	ChatMessage,
	TextPart,
	ImagePart,
	ImageURL,
	AudioPart,
	InputAudio,
)
from .multimodal import (
	DEFAULT_AUDIO_PROMPT,
	detect_mime_type,
	image_to_data_url,
	build_image_request,
	build_audio_request,
)
from .transport import Transport, RequestsTransport
from .errors import (
	TimewebError,
	ConfigurationError,
	NetworkError,
	ResponseReadError,
	APIError,
	InvalidResponseError,
	EmbedFetchError,
)
