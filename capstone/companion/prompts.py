"""Chapter-specific texts for the chat companion.

Welcome messages, quick suggestions and the system prompt sent to the
upstream model.
"""

APPLY_INSTRUCTION = "Click 'Apply Content' to add this to your document."

CHAPTER_LABELS: dict[int, str] = {
    1: "Introduction",
    2: "Literature Review",
    3: "Methodology",
    4: "Results & Analysis",
    5: "Conclusion & Recommendations",
}

WELCOME_MESSAGES: dict[int, str] = {
    1: (
        "Hello! I'm your AI companion for Chapter 1: Introduction. I'm here to help you craft "
        "a compelling introduction to your capstone project. I can assist with background "
        "information, problem statements, objectives, and research questions."
    ),
    2: (
        "Welcome to Chapter 2: Literature Review! I'll help you organize your literature "
        "review, identify key themes, find gaps in existing research, and structure your "
        "theoretical framework."
    ),
    3: (
        "Ready for Chapter 3: Methodology! I'll guide you through research design, data "
        "collection methods, participant selection, ethical considerations, and analytical "
        "approaches."
    ),
    4: (
        "Time for Chapter 4: Results & Analysis! I can help you present findings clearly, "
        "create data interpretations, discuss implications, and link results to your research "
        "questions."
    ),
    5: (
        "Chapter 5: Conclusion & Recommendations! I'll assist with summarizing key findings, "
        "drawing conclusions, providing recommendations, and discussing limitations and "
        "future research directions."
    ),
}

DEFAULT_WELCOME = "Welcome! I'm here to help with your capstone project."

QUICK_SUGGESTIONS: dict[int, tuple[str, ...]] = {
    1: (
        "Help me write a problem statement",
        "Suggest research objectives",
        "Guide me with background context",
        "Help with research questions",
    ),
    2: (
        "Organize my literature themes",
        "Help identify research gaps",
        "Structure theoretical framework",
        "Suggest citation strategies",
    ),
    3: (
        "Choose research methodology",
        "Design data collection plan",
        "Select appropriate sample size",
        "Address ethical considerations",
    ),
    4: (
        "Analyze my findings",
        "Create result interpretations",
        "Link results to objectives",
        "Discuss implications",
    ),
    5: (
        "Summarize key findings",
        "Write strong conclusions",
        "Develop recommendations",
        "Identify limitations",
    ),
}

SYSTEM_PROMPT_TEMPLATE = """You are an expert academic advisor helping students write Chapter {number} ({label}) of their capstone project on "{chapter_title}".

Your role is to:
- When students ask you to generate, write, or create any section{examples}, immediately provide complete, academic-quality content
- After generating content, ALWAYS end with: "{apply_instruction}"
- Be direct and provide content first, ask clarifying questions only if absolutely necessary
- Keep responses focused on Chapter {number} content only
- Use academic, professional language suitable for a capstone project
- Stay strictly on the topic of their capstone project

Important: If asked to generate anything, do it immediately. Only discuss Chapter {number} topics."""

FALLBACK_SYSTEM_PROMPT = (
    'You are an academic advisor helping with capstone project "{chapter_title}". '
    "Keep responses focused on the capstone topic only."
)


def welcome_message(chapter_number: int) -> str:
    return WELCOME_MESSAGES.get(chapter_number, DEFAULT_WELCOME)


def quick_suggestions(chapter_number: int) -> list[str]:
    return list(QUICK_SUGGESTIONS.get(chapter_number, ()))


def build_system_prompt(chapter_number: int, chapter_title: str) -> str:
    """System instruction for the upstream model, focused on one chapter."""
    label = CHAPTER_LABELS.get(chapter_number)
    if label is None:
        return FALLBACK_SYSTEM_PROMPT.format(chapter_title=chapter_title)
    examples = " (problem statement, objectives, background, etc.)" if chapter_number == 1 else ""
    return SYSTEM_PROMPT_TEMPLATE.format(
        number=chapter_number,
        label=label,
        chapter_title=chapter_title,
        examples=examples,
        apply_instruction=APPLY_INSTRUCTION,
    )
