"""
Text Normalization Transformer

Folds vendor punctuation variants into plain ASCII before parsing or storage.
"""

# En dash and em dash both become a hyphen-minus
DASH_TRANSLATION = str.maketrans({
    "\u2013": "-",
    "\u2014": "-",
})


def normalize_text(text: str) -> str:
    """
    Replace en/em dashes with "-".

    "10–25 days" -> "10-25 days". Safe to apply more than once.
    """
    return text.translate(DASH_TRANSLATION)
