"""Prompt templates sent to the model."""

from __future__ import annotations

QUESTION_PROMPT = """Generate {count} technical interview questions for the domain: {domain}.
Questions should be:
1. Progressive in difficulty (easy to hard)
2. Practical and relevant to real-world scenarios
3. Cover different aspects of the domain
4. Suitable for evaluating both theoretical knowledge and practical understanding

Return the response as a JSON array with objects containing 'id', 'question', 'difficulty' (easy/medium/hard), and 'category' fields.

Example format:
[
  {{
    "id": 1,
    "question": "What is...",
    "difficulty": "easy",
    "category": "fundamentals"
  }}
]"""

EVALUATION_PROMPT = """You are an expert interviewer evaluating a candidate's response for a {domain} position.

Question: {question}
Candidate's Answer: {answer}

Please evaluate this answer comprehensively and provide detailed feedback. Consider:
1. Technical accuracy and depth of knowledge
2. Clarity of explanation and communication skills
3. Practical understanding and real-world application
4. Completeness of the answer
5. Problem-solving approach

Provide your evaluation in this exact JSON format:
{{
  "score": [number from 0-10, where 10 is excellent],
  "feedback": "Detailed constructive feedback explaining the score and overall assessment",
  "strengths": ["List 2-4 specific strengths demonstrated in the answer"],
  "improvements": ["List 2-4 specific areas for improvement or missing elements"],
  "keyPoints": ["List 3-5 key points that should have been mentioned for a complete answer"]
}}

Be professional, constructive, and specific in your feedback. Focus on helping the candidate improve."""


def build_question_prompt(domain: str, count: int) -> str:
    return QUESTION_PROMPT.format(domain=domain, count=count)


def build_evaluation_prompt(domain: str, question: str, answer: str) -> str:
    return EVALUATION_PROMPT.format(domain=domain, question=question, answer=answer)
