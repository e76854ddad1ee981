"""Fixed category and indicator keys, in display order."""

LL_KEYS = [
    "mover",
    "doer",
    "influencer",
    "responder",
    "shaper",
    "producer",
    "contemplator",
]

LEARNING_PREFERENCE_KEYS = [
    "learningPreferenceAuditory",
    "learningPreferenceVisual",
    "learningPreferencePhysical",
]

CI_KEYS = [
    "acceptanceLevel",
    "interactiveStyle",
    "internalControl",
    "intrusionLevel",
    "projectiveLevel",
    "susceptibilityToStress",
] + LEARNING_PREFERENCE_KEYS

# Alternate input fields for Interactive Style (split form)
INTERACTIVE_STYLE_SPLIT_KEYS = ["interactiveStyleScore", "interactiveStyleType"]

# Indicators that have no Life Language forensics
FORENSIC_EXEMPT_KEYS = frozenset(["susceptibilityToStress"] + LEARNING_PREFERENCE_KEYS)
