import json
import logging
from typing import Any, Dict, List, Optional

from openai import OpenAI

from edusync.exceptions import AIServiceError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a patient tutor helping school students and teachers."


class TutorAssistant:
    """Wraps the AI tutor prompts around the OpenAI chat completions API.

    Without an API key every call returns a fixed placeholder so the dashboard
    stays usable in development.
    """

    def __init__(self, api_key: Optional[str] = None, model_name: str = "gpt-4o",
                 temperature: float = 0.3, client: Optional[OpenAI] = None):
        self.model_name = model_name
        self.temperature = temperature
        self.client = client
        if self.client is None and api_key:
            self.client = OpenAI(api_key=api_key)
            logger.info(f"Using OpenAI model: {self.model_name}")

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def generate(self, user_prompt: str, json_mode: bool = False) -> Optional[str]:
        """Send one tutor prompt; provider failures are raised as ``AIServiceError``."""
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": user_prompt},
        ]
        kwargs: Dict[str, Any] = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        try:
            response = self.client.chat.completions.create(
                model=self.model_name,
                messages=messages,
                temperature=self.temperature,
                **kwargs,
            )
        except Exception as e:
            logger.error(f"An unexpected error occurred during LLM generation: {e}", exc_info=True)
            raise AIServiceError(str(e)) from e
        return response.choices[0].message.content

    def _complete(self, prompt: str, empty: str, json_mode: bool = False) -> str:
        return self.generate(prompt, json_mode=json_mode) or empty

    def summarize(self, text: str) -> str:
        if not self.enabled:
            return f"This is a summary of: {text[:50]}..."
        prompt = f"Please summarize the following text concisely while maintaining key points:\n\n{text}"
        return self._complete(prompt, "No summary generated")

    def answer_question(self, question: str, context: Optional[str] = None) -> str:
        if not self.enabled:
            return f'Here is the answer to your question: "{question}"'
        prompt = f"Please answer the following question concisely and accurately: {question}"
        if context:
            prompt = f"Based on the following information:\n\n{context}\n\nPlease answer this question: {question}"
        return self._complete(prompt, "No answer generated")

    def generate_quiz(self, subject: str, topic: str, count: int = 5) -> List[Dict[str, Any]]:
        if not self.enabled:
            return [{
                "question": f"Sample {subject} question about {topic}?",
                "options": ["Option A", "Option B", "Option C", "Option D"],
                "correct_answer": "Option A",
            }]
        prompt = (
            f"Generate {count} multiple-choice quiz questions about {topic} for a {subject} class. "
            "For each question, provide four options and indicate the correct answer. "
            'Respond with a JSON object: {"questions": [{"question": "...", '
            '"options": ["...", "...", "...", "..."], "correct_answer": "..."}]}'
        )
        content = self._complete(prompt, "", json_mode=True)
        try:
            questions = json.loads(content)["questions"]
        except (ValueError, KeyError, TypeError) as e:
            raise AIServiceError("Quiz response was not valid JSON") from e
        for question in questions:
            # Models sometimes answer in camelCase despite the prompt
            if "correctAnswer" in question and "correct_answer" not in question:
                question["correct_answer"] = question.pop("correctAnswer")
        return questions

    def analyze_performance(self, performance_data: Dict[str, Any]) -> str:
        if not self.enabled:
            return "Performance analysis not available. Please check back later."
        prompt = ("Analyze the following student performance data and provide a concise summary "
                  f"of trends and recommendations:\n{json.dumps(performance_data, default=str)}")
        return self._complete(prompt, "No analysis generated")
