"""Preset topics, styles and personalities, plus context suggestions."""

import random

TOPIC_CATEGORIES = {
    "Technology": [
        "Artificial Intelligence and Machine Learning",
        "Blockchain and Cryptocurrency",
        "Cybersecurity and Privacy",
        "Future of Work and Automation",
        "Virtual Reality and Metaverse",
        "Quantum Computing Revolution",
    ],
    "Science": [
        "Climate Change and Environmental Solutions",
        "Space Exploration and Astronomy",
        "Biotechnology and Gene Editing",
        "Renewable Energy Technologies",
        "Medical Breakthroughs and Healthcare",
        "Ocean Conservation and Marine Biology",
    ],
    "Economics & Business": [
        "Global Economic Trends",
        "Startup Culture and Entrepreneurship",
        "Sustainable Business Practices",
        "Digital Marketing Revolution",
        "Supply Chain Innovation",
        "Financial Technology (FinTech)",
    ],
    "Society & Culture": [
        "Social Media Impact on Society",
        "Mental Health Awareness",
        "Education System Reform",
        "Cultural Diversity and Inclusion",
        "Urban Planning and Smart Cities",
        "Food Security and Agriculture",
    ],
}

# style name → (description, characteristics)
STYLE_DESCRIPTIONS = {
    "Joe Rogan Style": (
        "Long-form conversational, curious questioning, deep dives into topics",
        "Casual, inquisitive, philosophical tangents",
    ),
    "NPR Style": (
        "Professional journalism, well-researched, balanced perspectives",
        "Informative, authoritative, structured storytelling",
    ),
    "TED Talk Style": (
        "Educational, inspiring, expert insights with actionable takeaways",
        "Motivational, expert-driven, solution-focused",
    ),
    "Comedy Podcast Style": (
        "Light-hearted discussion with humor, entertaining while informative",
        "Funny, relatable, casual banter with insights",
    ),
    "Interview Style": (
        "Structured Q&A format with expert guests and deep expertise",
        "Professional, focused, expert knowledge sharing",
    ),
    "Debate Style": (
        "Multiple perspectives, constructive disagreement, balanced arguments",
        "Analytical, challenging, multiple viewpoints",
    ),
}

HOST_TEMPLATES = [
    "Joe Rogan style - Deep, conversational with curious questioning and casual exploration",
    "Lex Fridman style - Thoughtful, technical, with philosophical undertones",
    "Tim Ferriss style - Analytical, detailed, focused on extracting actionable insights",
    "Sam Harris style - Philosophical, measured, with deep intellectual discourse",
    "Alex Cooper style - Energetic, engaging, with modern cultural insights",
    "Dax Shepard style - Casual, humorous, with personal anecdotes and empathy",
    "Marc Maron style - Intense, personal, with deep emotional exploration",
    "Terry Gross style - Professional, warm, with masterful interviewing",
    "Guy Raz style - Narrative-driven, engaging storytelling with business focus",
    "Ezra Klein style - Analytical, policy-focused, with structured discussion",
]

EXPERT_PERSONALITIES = [
    "Curious interviewer who asks probing questions",
    "Expert scientist with deep technical knowledge",
    "Skeptical journalist who challenges assumptions",
    "Enthusiastic advocate for the topic",
    "Practical business executive with real-world experience",
    "Academic researcher with theoretical insights",
    "Industry veteran with historical perspective",
    "Young innovator with fresh ideas",
    "Policy maker focused on regulations and ethics",
    "Consumer advocate representing public interests",
]

DEFAULT_PERSONALITIES = (
    HOST_TEMPLATES[0],
    "Subject matter expert with deep knowledge",
)

DURATION_CHOICES = ("5", "10", "15", "20", "30")

CONTEXT_SUGGESTIONS = [
    "Explore the latest developments in {topic}, discussing current trends, challenges, "
    "and future implications for society and industry.",
    "Dive deep into {topic} from multiple perspectives, examining both opportunities and "
    "potential risks while providing actionable insights.",
    "Analyze the impact of {topic} on everyday life, featuring expert opinions, real-world "
    "examples, and practical applications.",
    "Investigate the cutting-edge research and innovations in {topic}, discussing breakthrough "
    "discoveries and their potential to transform our world.",
]


def suggest_context(topic: str, rng: random.Random | None = None) -> str:
    """Pick a context paragraph for a topic."""
    rng = rng or random
    return rng.choice(CONTEXT_SUGGESTIONS).format(topic=topic.strip().lower())
