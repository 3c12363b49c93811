"""
Adaptive prompt construction.

Each size category gets its own system instruction. The templates share a
behavioral contract (preserve facts, bounded length drift, return the
rewritten text only) and differ in framing, permitted drift, and whether
multi-section consistency guidance is included.
"""

from dataclasses import dataclass

from humanizer.classifier import SizeCategory


@dataclass(frozen=True)
class PromptPair:
    system: str
    user: str


_TEMPLATES = {
    SizeCategory.SHORT: {
        "system": """You are a clarity expert. Improve short text while preserving core message.

Rules:
1. Maintain all facts and original meaning exactly
2. Keep similar length (within 10% of original)
3. Use natural, conversational language
4. Remove unnecessary words and jargon
5. Use active voice when possible
6. Preserve formatting (bold, lists, etc.)
7. Replace abstract language with concrete examples

Return ONLY the rewritten text with no explanations.""",
        "guidance": None,
        "cue": "Rewritten version:",
    },
    SizeCategory.MEDIUM: {
        "system": """You are a writing improvement specialist. Enhance medium-length text for clarity and engagement.

Rules:
1. Preserve all factual content and original meaning
2. Keep length within 15% of original
3. Improve clarity and readability
4. Use varied sentence structure
5. Create natural transitions between ideas
6. Add emphasis through structure, not just adverbs
7. Maintain consistent tone throughout

Return ONLY the improved text with no explanations.""",
        "guidance": None,
        "cue": "Improved version:",
    },
    SizeCategory.LONG: {
        "system": """You are a professional editor. Refine long-form text for maximum impact.

Rules:
1. Preserve all important information and meaning
2. Maintain consistent style throughout
3. Create natural flow between sections
4. Ensure each paragraph has clear purpose
5. Remove redundancies
6. Use varied pacing to maintain reader engagement
7. Keep similar length (within 20%)

Return ONLY the refined text with no explanations.""",
        "guidance": "This is a lengthy passage. Maintain consistency while keeping each section natural and engaging.",
        "cue": "Refined version:",
    },
    SizeCategory.VERY_LONG: {
        "system": """You are a master editor. Optimize very long text for clarity, readability, and impact.

Rules:
1. Preserve all critical information
2. Maintain consistent voice throughout
3. Ensure logical flow and structure
4. Remove all redundancies
5. Break complex ideas into digestible pieces
6. Use varied pacing strategically
7. Keep length within 25%

Return ONLY the optimized text with no explanations.""",
        "guidance": "This is very long content. Ensure consistency, clarity, and engagement throughout all sections.",
        "cue": "Optimized version:",
    },
}


def describe_parameters(perspective, tone, style):
    """
    Render the user's style choices as a short parameter block.

    Args:
        perspective (str): "maintain" or a value like "first-person"
        tone (str): Tone preference
        style (str): Style preference

    Returns:
        str: Multi-line parameter summary
    """
    if perspective == "maintain":
        perspective_text = "Keep original perspective"
    else:
        perspective_text = perspective.replace("-", " ").replace("_", " ")

    return f"""Parameters:
- Perspective: {perspective_text}
- Tone: {tone}
- Style: {style}"""


def build(text, perspective, tone, style, category):
    """
    Build the system and user instructions for one rewrite.

    Args:
        text (str): Text to rewrite (already masked, if masking is on)
        perspective (str): Writing perspective
        tone (str): Tone preference
        style (str): Style preference
        category (SizeCategory): Size category of the original text.
            Unknown values fall back to the SHORT template.

    Returns:
        PromptPair: The system and user instructions

    Example:
        >>> pair = build("hi there", "maintain", "friendly", "casual", SizeCategory.SHORT)
        >>> pair.system.startswith("You are a clarity expert")
        True
    """
    template = _TEMPLATES.get(category, _TEMPLATES[SizeCategory.SHORT])

    sections = [describe_parameters(perspective, tone, style)]
    if template["guidance"]:
        sections.append(template["guidance"])
    sections.append(f"Original text:\n{text}")
    sections.append(template["cue"])

    return PromptPair(system=template["system"], user="\n\n".join(sections))
