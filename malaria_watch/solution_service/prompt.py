"""
Prompt template for the solution request.
"""

SOLUTION_PROMPT = (
    "Analyze this report to provide a solution to prevent malaria, respond in portuguese. "
    "Title: {title}, Description: {description}. "
    "Also analyze the image and what to fix in the image to avoid malaria"
)


def build_prompt(title: str, description: str) -> str:
    """
    Fill the solution template with the report text.

    Args:
        title (str): Report title, inserted verbatim.
        description (str): Report description, inserted verbatim.

    Returns:
        str: The instruction sent alongside the image.
    """
    return SOLUTION_PROMPT.format(title=title, description=description)
