from ticket_flow.core.application.intent.regex_intent_parser import NOISE_WORDS, RegexIntentParser

__all__ = ["NOISE_WORDS", "RegexIntentParser"]
