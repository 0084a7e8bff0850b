from textstyles.stylesheet.parser import parse_stylesheet
from textstyles.stylesheet.model import Declaration, Rule, Stylesheet

__all__ = ["parse_stylesheet", "Declaration", "Rule", "Stylesheet"]
