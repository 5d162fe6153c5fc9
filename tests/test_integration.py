'''
Live test against the real API.

Runs only when TIMEWEB_AI_TOKEN and TIMEWEB_AGENT_ID are set,
TIMEWEB_PROXY_SOURCE is optional.
'''

import unittest
import os
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from TimewebCloudAI import TimewebCloudAIClient, RequestsTransport

TOKEN = os.environ.get("TIMEWEB_AI_TOKEN")
AGENT_ID = os.environ.get("TIMEWEB_AGENT_ID")

@unittest.skipUnless(TOKEN and AGENT_ID, "set TIMEWEB_AI_TOKEN and TIMEWEB_AGENT_ID to run")
class TestRealAPI(unittest.TestCase):
	def setUp(self):
		self.client = TimewebCloudAIClient(
			TOKEN,
			os.environ.get("TIMEWEB_PROXY_SOURCE", "test-integration"),
			transport=RequestsTransport(timeout=15)
		)

	def tearDown(self):
		self.client.close()

	def test_call(self):
		response = self.client.call(AGENT_ID, {"message": "Hi! Who are you?"})
		self.assertTrue(response.get("id"))
		self.assertIsInstance(response.get("message"), str)
		self.assertGreater(len(response["message"]), 0)

	def test_get_models(self):
		models = self.client.agent(AGENT_ID).get_models()
		self.assertEqual(models.get("object"), "list")

if __name__ == '__main__':
	unittest.main()
