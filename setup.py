from setuptools import setup, find_packages

setup(
	name="TimewebCloudAI",
	version="0.1.0",
	description="A client for Timeweb Cloud AI agents: calls, OpenAI compatible chat completions and multimodal helpers.",
	long_description=open("README.md").read(),
	long_description_content_type="text/markdown",
	packages=find_packages(include=["TimewebCloudAI", "TimewebCloudAI.*"]),
	classifiers=[
		"Programming Language :: Python :: 3",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
	],
	python_requires=">=3.10.12",
	install_requires=[
		"requests",
		"dataclasses-json>=0.6",
	],
	extras_require={
		"dev": ["pytest"],
	},
)
