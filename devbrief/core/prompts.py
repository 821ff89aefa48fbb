INSIGHT_PROMPT = "Share one interesting fact or insight about programming, software development, or computer science."
FOCUS_PROMPT = "Give me one specific and actionable focus suggestion for a software developer today."
TRIVIA_PROMPT = "Give a fun, short programming trivia or fact."
PATTERN_PROMPT = "Name one common software architecture pattern and describe it briefly."
TOOL_PROMPT = "Recommend one lesser-known but useful developer tool or CLI utility."

# Used when the model call fails. Focus has none: a failed focus suggestion
# aborts the whole briefing.
INSIGHT_FALLBACK = "Stay curious and keep building."
TRIVIA_FALLBACK = "The first computer bug was an actual moth."
PATTERN_FALLBACK = "MVC (Model-View-Controller) separates concerns in web apps."
TOOL_FALLBACK = "Try `jq` – a powerful CLI JSON processor."
