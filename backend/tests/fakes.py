import json
import threading

import fitz


class FakeGenerator:
    """
    Scripted stand-in for the Gemini client.

    Each scripted item is either raw reply text or an exception to raise.
    Once the script runs out the last item repeats.
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.prompts: list[str] = []
        self._lock = threading.Lock()

    def generate(self, prompt: str) -> str:
        with self._lock:
            self.prompts.append(prompt)
            index = min(len(self.prompts), len(self.responses)) - 1
            response = self.responses[index]
        if isinstance(response, Exception):
            raise response
        return response


def make_question(text: str, topic: str = "General", answer: str = "A") -> dict:
    return {
        "question": text,
        "options": ["A. One", "B. Two", "C. Three", "D. Four"],
        "answer": answer,
        "explanation": f"Because of {text}",
        "topic": topic,
        "difficulty": "medium",
    }


def model_reply(summary=None, questions=(), wrapper="Here is your quiz:\n{}\nGood luck!") -> str:
    payload = {"questions": list(questions)}
    if summary is not None:
        payload["summary"] = summary
    return wrapper.format(json.dumps(payload))


def make_pdf(*pages: str) -> bytes:
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        page.insert_text((72, 72), text, fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data
