"""Static questions served when the model cannot generate them."""

from __future__ import annotations

from typing import Dict, List

DEFAULT_DOMAIN = "default"

QUESTION_BANK: Dict[str, List[dict]] = {
    "Web Development": [
        {"id": 1, "question": "What is the difference between HTML, CSS, and JavaScript?", "difficulty": "easy", "category": "fundamentals"},
        {"id": 2, "question": "Explain the concept of responsive web design.", "difficulty": "easy", "category": "design"},
        {"id": 3, "question": "What are the different HTTP methods and when would you use them?", "difficulty": "medium", "category": "backend"},
        {"id": 4, "question": "How does browser caching work and how can you control it?", "difficulty": "medium", "category": "performance"},
        {"id": 5, "question": "Explain the concept of RESTful APIs and their principles.", "difficulty": "medium", "category": "backend"},
        {"id": 6, "question": "What are some common web security vulnerabilities and how do you prevent them?", "difficulty": "hard", "category": "security"},
        {"id": 7, "question": "How would you optimize a web application's performance?", "difficulty": "hard", "category": "performance"},
    ],
    "Data Science": [
        {"id": 1, "question": "What is the difference between supervised and unsupervised learning?", "difficulty": "easy", "category": "fundamentals"},
        {"id": 2, "question": "Explain what data preprocessing involves.", "difficulty": "easy", "category": "preprocessing"},
        {"id": 3, "question": "What is overfitting and how can you prevent it?", "difficulty": "medium", "category": "modeling"},
        {"id": 4, "question": "How do you handle missing data in a dataset?", "difficulty": "medium", "category": "preprocessing"},
        {"id": 5, "question": "Explain the bias-variance tradeoff.", "difficulty": "medium", "category": "theory"},
        {"id": 6, "question": "How would you design an A/B test for a new feature?", "difficulty": "hard", "category": "experimentation"},
        {"id": 7, "question": "Explain how you would build a recommendation system.", "difficulty": "hard", "category": "systems"},
    ],
    "AI & Machine Learning": [
        {"id": 1, "question": "What is the difference between artificial intelligence and machine learning?", "difficulty": "easy", "category": "fundamentals"},
        {"id": 2, "question": "Explain what a neural network is and how it works.", "difficulty": "easy", "category": "neural-networks"},
        {"id": 3, "question": "What is the difference between classification and regression?", "difficulty": "medium", "category": "algorithms"},
        {"id": 4, "question": "How do you prevent overfitting in machine learning models?", "difficulty": "medium", "category": "optimization"},
        {"id": 5, "question": "Explain the concept of gradient descent.", "difficulty": "medium", "category": "optimization"},
        {"id": 6, "question": "What are the key components of a transformer architecture?", "difficulty": "hard", "category": "deep-learning"},
        {"id": 7, "question": "How would you approach building a recommendation system for a streaming platform?", "difficulty": "hard", "category": "systems"},
    ],
    "Product Management": [
        {"id": 1, "question": "What is the role of a product manager?", "difficulty": "easy", "category": "fundamentals"},
        {"id": 2, "question": "How do you prioritize features in a product roadmap?", "difficulty": "easy", "category": "planning"},
        {"id": 3, "question": "What metrics would you use to measure product success?", "difficulty": "medium", "category": "analytics"},
        {"id": 4, "question": "How do you handle conflicting stakeholder requirements?", "difficulty": "medium", "category": "stakeholder-management"},
        {"id": 5, "question": "Describe your approach to user research and validation.", "difficulty": "medium", "category": "research"},
        {"id": 6, "question": "How would you launch a new product in a competitive market?", "difficulty": "hard", "category": "strategy"},
        {"id": 7, "question": "Design a product strategy for entering a new market segment.", "difficulty": "hard", "category": "strategy"},
    ],
    "UI/UX Design": [
        {"id": 1, "question": "What is the difference between UI and UX design?", "difficulty": "easy", "category": "fundamentals"},
        {"id": 2, "question": "Explain the importance of user personas in design.", "difficulty": "easy", "category": "user-research"},
        {"id": 3, "question": "What is the design thinking process?", "difficulty": "medium", "category": "process"},
        {"id": 4, "question": "How do you conduct usability testing?", "difficulty": "medium", "category": "testing"},
        {"id": 5, "question": "What are design systems and why are they important?", "difficulty": "medium", "category": "systems"},
        {"id": 6, "question": "How would you design an accessible interface for users with disabilities?", "difficulty": "hard", "category": "accessibility"},
        {"id": 7, "question": "Design a mobile app interface for a complex workflow.", "difficulty": "hard", "category": "interaction-design"},
    ],
    "Cybersecurity": [
        {"id": 1, "question": "What are the main types of cyber threats?", "difficulty": "easy", "category": "fundamentals"},
        {"id": 2, "question": "Explain the concept of defense in depth.", "difficulty": "easy", "category": "strategy"},
        {"id": 3, "question": "What is the difference between symmetric and asymmetric encryption?", "difficulty": "medium", "category": "cryptography"},
        {"id": 4, "question": "How do you conduct a security risk assessment?", "difficulty": "medium", "category": "risk-management"},
        {"id": 5, "question": "What are the key components of an incident response plan?", "difficulty": "medium", "category": "incident-response"},
        {"id": 6, "question": "How would you secure a cloud infrastructure?", "difficulty": "hard", "category": "cloud-security"},
        {"id": 7, "question": "Design a security architecture for a financial services company.", "difficulty": "hard", "category": "architecture"},
    ],
    DEFAULT_DOMAIN: [
        {"id": 1, "question": "Tell me about your experience in this field.", "difficulty": "easy", "category": "experience"},
        {"id": 2, "question": "What are your greatest strengths?", "difficulty": "easy", "category": "personal"},
        {"id": 3, "question": "How do you stay updated with industry trends?", "difficulty": "medium", "category": "learning"},
        {"id": 4, "question": "Describe a challenging project you worked on.", "difficulty": "medium", "category": "experience"},
        {"id": 5, "question": "How do you handle tight deadlines?", "difficulty": "medium", "category": "work-style"},
        {"id": 6, "question": "Where do you see yourself in 5 years?", "difficulty": "hard", "category": "career"},
        {"id": 7, "question": "Why should we hire you?", "difficulty": "hard", "category": "motivation"},
    ],
}


def fallback_questions(domain: str) -> List[dict]:
    """Return copies of the stored questions for ``domain``, or the default set."""
    questions = QUESTION_BANK.get(domain, QUESTION_BANK[DEFAULT_DOMAIN])
    return [dict(q) for q in questions]
