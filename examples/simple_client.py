"""
Simple example of using the TimewebCloudAI client.

Expects TIMEWEB_AI_TOKEN, TIMEWEB_PROXY_SOURCE and TIMEWEB_AGENT_ID
in the environment.
"""

from TimewebCloudAI import TimewebCloudAIClient, ChatCompletionRequest, ChatMessage, APIError
import logging
import json
import sys
import os

def main():
	logging.basicConfig(level=logging.DEBUG)

	with TimewebCloudAIClient.from_env() as client:
		agent = client.agent(os.environ["TIMEWEB_AGENT_ID"])

		print(json.dumps(agent.get_models(), indent=4))

		response = agent.call({"message": "Hi! Who are you?"})
		print(response["message"])

		completion = agent.complete(ChatCompletionRequest(
			messages=[
				ChatMessage(role="system", content="Only write 1 word answers"),
				ChatMessage(role="user", content="What color is the sky?"),
			],
			temperature=0.2
		))
		print(completion.text, completion.usage)

		if len(sys.argv) > 1:
			print(agent.chat_with_image(sys.argv[1], text="What is on this picture?").text)

if __name__ == "__main__":
	try:
		main()
	except APIError as e:
		print(f"API error {e.status}: {json.dumps(e.body, indent=4)}")
		sys.exit(1)
