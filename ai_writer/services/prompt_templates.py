"""Prompt templates for direct generation and prompt improvement.

Every function here is pure: the same (type, tone, content) always renders
the same prompt string. Unrecognized writing types fall back to generic
wording instead of failing.
"""

from typing import Callable, Dict

from ai_writer.models.writing import (
    ToneLike,
    WritingTypeLike,
    tone_value,
    type_value,
)

SYSTEM_PROMPTS: Dict[str, Callable[[str], str]] = {
    "email": lambda tone: (
        f"You are an assistant helping write a {tone} email.\n"
        "Focus on clear communication, appropriate tone, and professional structure.\n"
        "Include a proper greeting and sign-off."
    ),
    "blog": lambda tone: (
        f"You are a professional content writer creating a {tone} blog post.\n"
        "Focus on engaging content, proper structure with headings, and maintaining reader interest.\n"
        "Include an introduction, main points, and conclusion."
    ),
    "story": lambda tone: (
        f"You are a creative writer crafting a {tone} story.\n"
        "Focus on narrative flow, character development, and engaging plot elements.\n"
        "Create an immersive experience for the reader."
    ),
    "suggestion": lambda tone: (
        "You are an AI writing assistant helping complete sentences.\n"
        "Provide natural, contextually appropriate continuations that maintain the original style and tone.\n"
        "Keep suggestions concise and relevant to the existing text."
    ),
}


def _default_system_prompt(tone: str) -> str:
    return (
        f"You are a versatile writing assistant producing {tone} content.\n"
        "Focus on clarity, sound structure, and a consistent tone.\n"
        "Follow the request closely."
    )


EMAIL_GUIDANCE = """Consider the following for an email:
- Clear subject line and purpose
- Professional greeting and sign-off
- Structured paragraphs with clear points
- Call to action if needed
- Appropriate length for the context

Structure your response with:
1. H1 for the main subject/title of the email
2. Clear headings for each section
3. Bullet points for key information
4. Numbered lists for steps or sequences
5. Bold text for important points
6. Proper spacing between sections"""

BLOG_GUIDANCE = """Consider the following for a blog post:
- Engaging headline and introduction
- Clear main points and subheadings
- Supporting examples or data
- Engaging conclusion
- SEO-friendly structure

Structure your response with:
1. H1 for main title
2. H2 for major sections
3. H3 for subsections
4. Bullet points for lists
5. Bold text for emphasis
6. Blockquotes for important quotes
7. Code blocks for technical content
8. Tables for structured data"""

STORY_GUIDANCE = """Consider the following for a story:
- Compelling opening hook
- Character development
- Plot progression
- Setting and atmosphere
- Satisfying conclusion

Structure your response with:
1. Clear scene breaks
2. Dialogue formatting
3. Character descriptions in italics
4. Important plot points in bold
5. Timeline markers
6. Setting descriptions in blockquotes
7. Emotional beats highlighted"""

GENERIC_GUIDANCE = """Consider the following for your content:
- Clear purpose and goals
- Target audience
- Key points to cover
- Desired outcome
- Any specific requirements

Structure your response with:
1. Clear hierarchy of headings
2. Bullet points for lists
3. Numbered steps where needed
4. Bold text for emphasis
5. Blockquotes for important quotes
6. Tables for structured data
7. Code blocks for technical content"""

TYPE_GUIDANCE: Dict[str, str] = {
    "email": EMAIL_GUIDANCE,
    "blog": BLOG_GUIDANCE,
    "story": STORY_GUIDANCE,
}

ENHANCEMENT_STEPS = """Please enhance the prompt by:
1. Adding specific details and context
2. Clarifying the main purpose and goals
3. Including any necessary background information
4. Specifying the target audience
5. Adding any relevant constraints or requirements
6. Ensuring proper markdown formatting for better readability
7. Using appropriate heading levels (H1, H2, H3)
8. Implementing bullet points and numbered lists
9. Adding emphasis where needed (bold, italic)
10. Including blockquotes for important information"""

OUTPUT_INSTRUCTION = (
    "Provide ONLY the improved prompt in markdown format, "
    "without any additional descriptions or explanations."
)


def system_prompt(writing_type: WritingTypeLike, tone: ToneLike) -> str:
    """Render the system instruction for a writing type and tone."""
    template = SYSTEM_PROMPTS.get(type_value(writing_type), _default_system_prompt)
    return template(tone_value(tone))


def guidance_for(writing_type: WritingTypeLike) -> str:
    """Return the structural guidance block for a writing type."""
    return TYPE_GUIDANCE.get(type_value(writing_type), GENERIC_GUIDANCE)


def build_prompt(writing_type: WritingTypeLike, tone: ToneLike, content: str) -> str:
    """Build the full prompt for direct generation.

    The content is embedded verbatim inside double quotes after the
    type-specific system instruction.
    """
    user_prompt = f'Write about: "{content}"'
    return f"{system_prompt(writing_type, tone)}\n\n{user_prompt}"


def build_improvement_prompt(
    writing_type: WritingTypeLike,
    tone: ToneLike,
    content: str,
) -> str:
    """Build the prompt asking the model to refine a draft prompt."""
    kind = type_value(writing_type)
    return (
        f"Improve this {tone_value(tone)} {kind} prompt to be more detailed and effective.\n"
        f'Current prompt: "{content}"\n'
        "\n"
        f"{guidance_for(kind)}\n"
        "\n"
        f"{ENHANCEMENT_STEPS}\n"
        "\n"
        f"{OUTPUT_INSTRUCTION}"
    )
