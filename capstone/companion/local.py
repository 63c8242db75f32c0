"""Local companion strategy: canned blocks matched by keyword."""

import logging
from dataclasses import dataclass

from capstone.companion.prompts import APPLY_INSTRUCTION

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CannedRule:
    """A canned reply selected when the message mentions ``key``."""

    key: str
    label: str
    body: str

    @property
    def first_word(self) -> str:
        return self.key.split()[0]

    def render(self, chapter_title: str) -> str:
        return f'Generated {self.label} for "{chapter_title}":\n\n{self.body}\n\n{APPLY_INSTRUCTION}'


CANNED_RULES: dict[int, tuple[CannedRule, ...]] = {
    1: (
        CannedRule(
            key="problem statement",
            label="Problem Statement",
            body=(
                "For your problem statement, consider these elements:\n"
                "1. What specific issue are you addressing?\n"
                "2. Why is this problem important?\n"
                "3. What gap exists in current knowledge/practice?\n"
                "4. How will your research contribute to solving this problem?\n\n"
                'Example structure: "Despite [current situation], there remains [specific gap] '
                "which leads to [consequences]. This research addresses [problem] by "
                '[your approach]."'
            ),
        ),
        CannedRule(
            key="research objectives",
            label="Research Objectives",
            body=(
                "Research objectives should be SMART (Specific, Measurable, Achievable, "
                "Relevant, Time-bound). Consider:\n"
                "1. General objective: Overall aim of your study\n"
                "2. Specific objectives: 3-5 detailed goals that support the general objective\n\n"
                'Format: "To [action verb] [what] [how] [why]"\n'
                'Example: "To examine the effectiveness of digital marketing strategies on '
                'customer engagement in small businesses."'
            ),
        ),
        CannedRule(
            key="background",
            label="Background",
            body=(
                "Your background section should:\n"
                "1. Start broad, then narrow to your specific topic\n"
                "2. Establish the importance of your research area\n"
                "3. Provide context for your research problem\n"
                "4. Connect to existing knowledge in the field\n\n"
                "Structure: General context, then specific area, then your focus, then the "
                "research gap"
            ),
        ),
        CannedRule(
            key="research questions",
            label="Research Questions",
            body=(
                "Good research questions are:\n"
                "1. Clear and focused\n"
                "2. Researchable within your timeframe\n"
                "3. Aligned with your objectives\n"
                "4. Open-ended (not yes/no)\n\n"
                'Types: Descriptive ("What is...?"), Comparative ("How does X compare to Y?"), '
                'Relationship ("What is the relationship between X and Y?")'
            ),
        ),
    ),
    2: (
        CannedRule(
            key="literature themes",
            label="Literature Themes",
            body=(
                "Organize your literature by themes, not chronologically. Common themes might be:\n"
                "1. Theoretical foundations\n"
                "2. Methodological approaches\n"
                "3. Key findings and trends\n"
                "4. Contradictions or debates\n"
                "5. Gaps and limitations\n\n"
                "Create a literature matrix with: Author, Year, Key findings, Methodology, "
                "Relevance to your study"
            ),
        ),
        CannedRule(
            key="research gaps",
            label="Research Gaps",
            body=(
                "Identify gaps by looking for:\n"
                "1. Understudied populations or contexts\n"
                "2. Methodological limitations in existing studies\n"
                "3. Contradictory findings that need resolution\n"
                "4. New perspectives or theoretical approaches\n"
                "5. Practical applications not yet explored\n\n"
                "Frame gaps as opportunities for your contribution."
            ),
        ),
        CannedRule(
            key="theoretical framework",
            label="Theoretical Framework",
            body=(
                "Your theoretical framework should:\n"
                "1. Define key concepts and variables\n"
                "2. Explain relationships between concepts\n"
                "3. Provide lens for data interpretation\n"
                "4. Connect to your research questions\n\n"
                "Include: Main theory/model, supporting theories, visual representation "
                "(diagram/model)"
            ),
        ),
    ),
    3: (
        CannedRule(
            key="methodology",
            label="Methodology",
            body=(
                "Choose methodology based on:\n"
                "1. Your research questions (What do you want to know?)\n"
                "2. Nature of your topic (Quantitative/Qualitative/Mixed)\n"
                "3. Available resources and time\n"
                "4. Access to participants/data\n\n"
                "Justify why your chosen approach is most appropriate for answering your "
                "research questions."
            ),
        ),
        CannedRule(
            key="data collection",
            label="Data Collection Plan",
            body=(
                "Design your data collection plan:\n"
                "1. What data do you need?\n"
                "2. How will you collect it? (surveys, interviews, observations)\n"
                "3. Who are your participants?\n"
                "4. When and where will you collect data?\n"
                "5. What tools/instruments will you use?\n\n"
                "Consider validity, reliability, and ethical requirements."
            ),
        ),
        CannedRule(
            key="sample",
            label="Sampling Plan",
            body=(
                "Sample size depends on:\n"
                "1. Research design (qualitative: 8-15 for interviews, quantitative: statistical "
                "power analysis)\n"
                "2. Population characteristics\n"
                "3. Available resources\n"
                "4. Saturation point (qualitative)\n\n"
                "Justify your sample size and selection method."
            ),
        ),
    ),
    4: (
        CannedRule(
            key="findings",
            label="Findings Presentation",
            body=(
                "Present findings systematically:\n"
                "1. Organize by research questions/objectives\n"
                "2. Use clear headings and subheadings\n"
                "3. Include relevant data (tables, figures, quotes)\n"
                "4. Describe patterns and trends\n"
                "5. Highlight key insights\n\n"
                "Let the data speak; interpret in the discussion section."
            ),
        ),
        CannedRule(
            key="interpretations",
            label="Result Interpretations",
            body=(
                "Interpret results by:\n"
                "1. Explaining what findings mean\n"
                "2. Connecting to existing literature\n"
                "3. Addressing research questions\n"
                "4. Discussing unexpected findings\n"
                "5. Considering alternative explanations\n\n"
                "Support interpretations with evidence from your data."
            ),
        ),
    ),
    5: (
        CannedRule(
            key="conclusions",
            label="Conclusions",
            body=(
                "Strong conclusions should:\n"
                "1. Directly answer research questions\n"
                "2. Summarize key findings concisely\n"
                "3. Demonstrate achievement of objectives\n"
                "4. Avoid introducing new information\n"
                "5. Connect back to problem statement\n\n"
                "Format: Research question, then key finding, then conclusion"
            ),
        ),
        CannedRule(
            key="recommendations",
            label="Recommendations",
            body=(
                "Develop recommendations for:\n"
                "1. Practice/Implementation\n"
                "2. Policy (if applicable)\n"
                "3. Future research\n"
                "4. Theory development\n\n"
                "Make recommendations specific, actionable, and evidence-based from your findings."
            ),
        ),
    ),
}


def match_rule(message: str, chapter_number: int) -> CannedRule | None:
    """First rule whose full key, then whose first key word, is in the message."""
    text = message.lower()
    rules = CANNED_RULES.get(chapter_number, ())
    for rule in rules:
        if rule.key in text:
            return rule
    for rule in rules:
        if rule.first_word in text:
            return rule
    return None


def fallback_reply(message: str, chapter_number: int) -> str:
    keys = [rule.key for rule in CANNED_RULES.get(chapter_number, ())]
    reply = (
        f'I understand you need help with "{message}". Based on your current content in '
        f"Chapter {chapter_number}, here are some suggestions:\n\n"
        "1. Review your current section structure - does it flow logically?\n"
        "2. Ensure each section supports your main chapter objective\n"
        "3. Consider if you need more detail or examples\n"
        "4. Check that your content aligns with academic writing standards"
    )
    if keys:
        reply += f"\n\nYou can also ask me to generate: {', '.join(keys)}."
    return reply


class LocalCompanion:
    """Replies from the canned table without any network call."""

    name = "local"

    def reply(self, message: str, chapter_number: int, chapter_title: str) -> str:
        rule = match_rule(message, chapter_number)
        if rule is None:
            logger.info(f"No canned reply for chapter {chapter_number}, using fallback")
            return fallback_reply(message, chapter_number)
        logger.info(f"Canned reply '{rule.key}' for chapter {chapter_number}")
        return rule.render(chapter_title)
