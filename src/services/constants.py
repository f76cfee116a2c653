"""
Constants and shared data for cycle-related services.
"""
from typing import Dict, List

# Fixed cycle-day offsets. These do not scale with the user's cycle length.
FERTILE_WINDOW_START = 10
FERTILE_WINDOW_END = 16
OVULATION_DAY = 14

PROBABILITY_OVULATION_DAY = 33
PROBABILITY_ADJACENT_DAY = 25
PROBABILITY_FERTILE_WINDOW = 15
PROBABILITY_BASELINE = 3

# Neutral values used when no entry carries the metric
DEFAULT_ENERGY_LEVEL = 5
DEFAULT_PAIN_LEVEL = 0

COMMON_SYMPTOM_LIMIT = 5
RECENT_ENTRY_WINDOW = 7
TREND_SAMPLE_SIZE = 3
TREND_THRESHOLD = 1

ANALYTICS_ENTRY_LIMIT = 90
FERTILITY_ENTRY_LIMIT = 6
PROMPT_ENTRY_LIMIT = 10
MAX_CALENDAR_DAYS = 366

DEFAULT_INSIGHT_MODEL = "llama-3.3-70b-versatile"
DEFAULT_INSIGHT_BASE_URL = "https://api.groq.com/openai/v1"

INSIGHT_SYSTEM_PROMPT = (
    "You are an expert menstrual health analyst. Provide compassionate, "
    "data-driven insights that empower users to understand and optimize "
    "their cycle health."
)

INSIGHT_PROMPT_TEMPLATE = """You are a compassionate menstrual health AI assistant. Analyze the following comprehensive user data and provide personalized, supportive insights.

## User Profile:
- Cycle Length: {cycle_length} days
- Period Length: {period_length} days
- Last Period Start: {last_period_start}

## Detailed Cycle Analysis:
{analysis}

## Recent Entries (last {entry_count}):
{recent_entries}

## Analysis Requirements:
Generate 4-6 personalized insights that demonstrate deep understanding of the user's patterns. Each insight should include:

1. **Pattern Recognition**: Identify correlations between symptoms, mood, and cycle phases
2. **Health Correlations**: Link lifestyle factors (sleep, exercise, water) to cycle health
3. **Predictive Insights**: Anticipate upcoming symptoms or energy patterns
4. **Personalized Recommendations**: Specific, actionable advice based on their data
5. **Wellness Support**: Encouraging messages for challenging patterns

## Response Format:
Return a JSON array of insights, each with:
- title: Clear, concise title (max 50 chars)
- message: Supportive, detailed message (max 200 chars)
- confidence: Number 0-100 based on data strength
- type: "pattern" | "prediction" | "tip" | "warning" | "celebration"
- category: "mood" | "symptoms" | "energy" | "health" | "cycle" | "wellness"

Focus on being empathetic, evidence-based, and empowering. Avoid medical diagnoses."""

# Returned when the service answers but the answer is not a JSON array
FALLBACK_INSIGHTS: List[Dict] = [
    {
        "title": "Data Analysis Complete",
        "message": "Your health data is being analyzed to provide personalized insights.",
        "confidence": 100,
        "type": "tip",
        "category": "wellness"
    },
    {
        "title": "Track Consistently",
        "message": "Regular logging helps identify patterns and optimize your wellness routine.",
        "confidence": 90,
        "type": "tip",
        "category": "wellness"
    }
]

# Returned when the service cannot be reached at all
UNAVAILABLE_INSIGHTS: List[Dict] = [
    {
        "title": "Welcome to Your Health Journey",
        "message": "Start logging your daily health data to unlock personalized insights about your cycle.",
        "confidence": 100,
        "type": "tip",
        "category": "wellness"
    }
]

SUPPORTIVE_MESSAGES = [
    "Your body is doing amazing things. Be gentle with yourself today. 💕",
    "Rest is productive too. Take breaks when you need them. 🌸",
    "You're stronger than you know. This too shall pass. 💜",
    "Listen to what your body needs today. It knows best. 💗",
    "Every cycle is a fresh start. You've got this. 🌺",
    "Your feelings are valid. It's okay to not be okay. 💜",
    "Hydrate, rest, and be kind to yourself today. 🌿",
    "You deserve care and comfort. Treat yourself gently. 🦋",
    "Your body is working hard. Honor it with rest. 🌙",
    "Remember: you are not alone in this journey. 💕",
]

PERIOD_MESSAGES = {
    "early": "Your body may feel tender today. Rest if you can. 💕",
    "middle": "You're doing great. Stay warm and cozy. 🌸",
    "late": "Almost there! Your strength is incredible. 💪",
}

PRE_PERIOD_MESSAGE = "Your period may arrive soon. Stock up on comfort items! 🧸"
PMS_MESSAGE = "PMS might be starting. Be extra kind to yourself. 💜"
OVULATION_MESSAGE = "You might be ovulating! Your energy could be higher. ✨"

FERTILITY_STATUS_PEAK = "Peak Fertility"
FERTILITY_STATUS_WINDOW = "Fertile Window"
FERTILITY_STATUS_UPCOMING = "{days} days until fertile window"
FERTILITY_STATUS_POST_OVULATION = "Post-ovulation phase"
