"""Prompt templates for draft refinement.

Templates use Python string placeholders ({variable_name}) for the tone
descriptors, category, and rendered draft.
"""

from email_polisher.domain.models import DraftOutput, ToneSettings
from email_polisher.domain.types import EmailCategory

# Indexed by tone value - 1.
FORMALITY_LEVELS = ("very casual", "casual", "neutral", "formal", "very formal")
CONFIDENCE_LEVELS = ("hesitant", "uncertain", "moderate", "confident", "very confident")

EMAIL_MARKER = "===EMAIL==="
EVAL_MARKER = "===EVAL==="

REFINE_SYSTEM_PROMPT = f"""You are an expert email writing assistant. Your task is to refine \
and improve email drafts while maintaining their core structure and intent.

CRITICAL REQUIREMENTS:
1. Always preserve the email structure: subject, greeting, body content, and closing
2. Maintain the original tone and category intent
3. Improve clarity, professionalism, and impact
4. Keep the email concise but comprehensive
5. Ensure proper business email etiquette

RESPONSE FORMAT:
Your response must contain exactly two sections separated by these markers:

{EMAIL_MARKER}
[Put the refined email here with this exact structure:]
Subject: [subject line]

[greeting]

[body paragraph 1]

[body paragraph 2]

[additional body paragraphs as needed]

[closing]

{EVAL_MARKER}
[Provide a brief evaluation of the changes made, explaining how the email was improved]

IMPORTANT:
- Never omit the subject, greeting, or closing
- Maintain the professional tone appropriate for business communication
- Ensure all sections are present and properly formatted"""

REFINE_USER_PROMPT = """Please refine this {category} email to be {formality} in tone, \
{confidence} in confidence, appropriate for a {seniority} level professional, and {length} \
in length.

Current email:
{email_text}

Focus on:
- Improving clarity and impact
- Ensuring appropriate {formality} tone
- Maintaining {confidence} confidence level
- Keeping it {length} in length
- Preserving all essential email components (subject, greeting, body, closing)"""


def build_user_prompt(draft: DraftOutput, tone: ToneSettings, category: EmailCategory) -> str:
    """Render the refinement user prompt for *draft*."""
    return REFINE_USER_PROMPT.format(
        category=category,
        formality=FORMALITY_LEVELS[tone.formality - 1],
        confidence=CONFIDENCE_LEVELS[tone.confidence - 1],
        seniority=tone.seniority,
        length=tone.length,
        email_text=draft.render(),
    )
