from typing import Any, Dict, List, Optional

def get_choice(response :Dict[str,Any], index:int=0) -> Optional[Dict[str,Any]]:
	'''
	Safely get response['choices'][index], None if there is no such choice.
	'''
	if not isinstance(response, dict):
		return None
	choices = response.get('choices') or []
	if not isinstance(choices, list) or len(choices) <= index:
		return None
	choice = choices[index]
	return choice if isinstance(choice, dict) else None

def get_msg(response :Dict[str,List[Dict[str,Dict[str,str]]]]) -> Optional[Dict[str,Any]]:
	'''
	Safely get message dict from response['choices'][0]['message']
	'''
	choice = get_choice(response)
	if choice is None:
		return None
	msg = choice.get('message')
	return msg if isinstance(msg, dict) else None

def get_msg_content(response :Dict[str,List[Dict[str,Dict[str,str]]]]) -> str:
	'''
	Safely get message content from response['choices'][0]['message']['content'],
	"" if it is missing.
	'''
	msg = get_msg(response)
	if msg is None:
		return ""
	content = msg.get('content')
	return content if isinstance(content, str) else ""

def get_finish_reason(response :Dict[str,List[Dict[str,str]]]) -> Optional[str]:
	'''
	Safely get finish reason from response['choices'][0]['finish_reason']
	'''
	choice = get_choice(response)
	if choice is None:
		return None
	return choice.get('finish_reason')
