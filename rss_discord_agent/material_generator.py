"""LLM generation of English study material from an article."""

import logging

from .config import LLMConfig
from .llm_client import LLMClient

logger = logging.getLogger(__name__)

MATERIAL_FAILURE_TEXT = "Failed to generate output."

MATERIAL_PROMPT_TEMPLATE = """**Prompt: Extract Essential Vocabulary and Expressions**

**Objective:**
Help Japanese learners improve their English reading skills by extracting and translating essential words, phrases, and expressions from an English article. The output should include the original text, its translation into Japanese, and the context in which it is used.

**Instructions:**

1. **Input Article:**
   Provide the full text of the English article you want to analyze.

2. **Identify Key Elements:**
   - **Words:** Select important vocabulary that is crucial for understanding the article.
   - **Phrases:** Identify common and article-specific phrases that enhance comprehension.
   - **Expressions:** Include any idiomatic or AI-related expressions used in the article.
   - **Slang:** Extract any slang terms that may appear in the text.

3. **Output Format:**
   For each identified element, provide the following:
   - **Original Text:** The word, phrase, or expression in English.
   - **Japanese Translation:** A direct translation or an explanation in Japanese.
   - **Contextual Sentence:** An example sentence from the article that shows how the word or phrase is used.


**Example Output:**

1. **Word:**
- Artificial Intelligence: 人工知能
- Context: Artificial Intelligence is transforming industries worldwide.

2. **Phrase:**
- Break the ice: 緊張をほぐす
- Context: The speaker told a joke to break the ice before the presentation.

3. **Expression:**
- Think outside the box: 型にはまらない考え方をする
- Context: To solve the problem, we need to think outside the box.

4. **Slang:**
- Hit the nail on the head: 図星を突く
- Context: Her analysis really hit the nail on the head.

**Output Tips:**

- Ensure the Japanese translation accurately reflects the meaning in the article's context.
- Highlight any cultural nuances that may affect comprehension.
- Include notes on usage if relevant.

**Submission:**
Paste the full text of the article below to begin the analysis.

{article}
"""


def build_material_prompt(article_text: str) -> str:
    """
    Build the study-material prompt for an article.

    Args:
        article_text: Plain article text, embedded verbatim.

    Returns:
        A formatted prompt string.
    """
    return MATERIAL_PROMPT_TEMPLATE.replace("{article}", article_text)


def generate_material(
    article_text: str,
    client: LLMClient,
    config: LLMConfig
) -> str:
    """
    Turn article text into vocabulary and expression notes.

    Args:
        article_text: Article body (may be a failure placeholder).
        client: LLM client instance.
        config: LLM configuration.

    Returns:
        The generated material, or MATERIAL_FAILURE_TEXT if the completion
        call failed for any reason.
    """
    prompt = build_material_prompt(article_text)
    try:
        material = client.complete(
            prompt,
            max_tokens=config.max_tokens,
            temperature=config.temperature
        )
    except Exception as e:
        logger.error(f"Error generating output ({config.model}): {e}")
        return MATERIAL_FAILURE_TEXT

    logger.info(f"Generated material ({len(material)} chars)")
    logger.debug(f"Material: {material[:200]}...")
    return material
