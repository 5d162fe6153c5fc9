import unittest
import warnings
import json
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from TimewebCloudAI import TimewebCloudAIClient, ChatCompletion, ConfigurationError, APIError
from stubs import StubTransport, StubResponse

AGENT_ID = "agt_bound"
COMPLETION = {
	"id": "c1",
	"choices": [{"index": 0, "message": {"role": "assistant", "content": " A cat. "}, "finish_reason": "stop"}],
	"usage": {"prompt_tokens": 10, "completion_tokens": 2, "total_tokens": 12}
}

class TestAgentInstance(unittest.TestCase):
	def setUp(self):
		self.transport = StubTransport()
		self.client = TimewebCloudAIClient("token", "tests", transport=self.transport)
		self.agent = self.client.agent(AGENT_ID)

	def respond(self, status:int, body):
		self.transport.responses.append(StubResponse(status, body if isinstance(body, str) else json.dumps(body)))

	def test_call(self):
		self.respond(200, {"id": "m1", "message": "hi", "finish_reason": {}})
		self.assertEqual(self.agent.call({"message": "hello"}), {"id": "m1", "message": "hi", "finish_reason": {}})
		self.assertIn(f"/agents/{AGENT_ID}/call", self.transport.last["url"])

	def test_chat_completions_and_complete(self):
		self.respond(200, COMPLETION)
		self.respond(200, COMPLETION)
		payload = {"messages": [{"role": "user", "content": "What is it?"}]}

		self.assertEqual(self.agent.chat_completions(payload), COMPLETION)
		completion = self.agent.complete(payload)

		self.assertIsInstance(completion, ChatCompletion)
		self.assertEqual(completion.text, "A cat.")
		for sent in self.transport.requests:
			self.assertIn(f"/agents/{AGENT_ID}/v1/chat/completions", sent["url"])

	def test_get_models(self):
		self.respond(200, {"object": "list", "data": [{"id": "m"}]})
		self.assertEqual(self.agent.get_models()["data"], [{"id": "m"}])
		self.assertEqual(self.transport.last["method"], "GET")

	def test_get_embed_script(self):
		self.respond(200, "script")
		with warnings.catch_warnings():
			warnings.simplefilter("ignore", DeprecationWarning)
			self.assertEqual(self.agent.get_embed_script(collapsed=False), "script")
		self.assertIn(f"/agents/{AGENT_ID}/embed.js?collapsed=false", self.transport.last["url"])

	def test_chat_with_image(self):
		self.respond(200, COMPLETION)
		completion = self.agent.chat_with_image(b"\x89PNG\r\n\x1a\n", text="What is it?", temperature=0.1)

		self.assertEqual(completion.text, "A cat.")
		self.assertEqual(completion.usage["total_tokens"], 12)
		body = json.loads(self.transport.last["body"])
		self.assertEqual(body["temperature"], 0.1)
		self.assertNotIn("max_tokens", body)
		content = body["messages"][0]["content"]
		self.assertEqual(content[0], {"type": "text", "text": "What is it?"})
		self.assertTrue(content[1]["image_url"]["url"].startswith("data:image/png;base64,"))

	def test_chat_with_audio(self):
		self.respond(200, COMPLETION)
		self.agent.chat_with_audio("UklGRg==", max_tokens=50)
		body = json.loads(self.transport.last["body"])
		self.assertEqual(body["max_tokens"], 50)
		self.assertEqual(body["messages"][0]["content"][1]["input_audio"], {"base64Audio": "UklGRg==", "format": "wav"})

	def test_errors_pass_through(self):
		self.respond(500, {"error": "boom"})
		with self.assertRaises(APIError) as ctx:
			self.agent.chat_with_audio("UklGRg==")
		self.assertEqual(ctx.exception.status, 500)

	def test_empty_agent_id(self):
		agent = self.client.agent("")
		with self.assertRaises(ConfigurationError):
			agent.get_models()
		with self.assertRaises(ConfigurationError):
			agent.chat_with_image("data:image/png;base64,AAAA")
		self.assertEqual(self.transport.requests, [])

if __name__ == '__main__':
	unittest.main()
