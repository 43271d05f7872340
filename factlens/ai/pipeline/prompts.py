"""
Prompt templates for the claim analysis service.
Uses ChatPromptTemplate so the template is shared by every chat model.
"""

from langchain_core.prompts import ChatPromptTemplate

# ===== SUMMARY SYNTHESIS PROMPTS =====

SUMMARY_SYSTEM_PROMPT = """You are a senior fact-check analyst. Your task is to synthesize the findings from a list of fact-checks provided in a raw JSON format. The JSON contains an array of claims reviewed by various publishers.

Base your answer ONLY on the data in the JSON you receive. Do not add outside knowledge."""

SUMMARY_USER_PROMPT = """JSON DATA:

```json
{claim_reviews_json}
```

Please structure your response in a strict JSON format with exactly three keys: "overview", "consensus", and "conclusion". Return only the JSON object.

1.  **overview**: (String) Write a neutral, 2-3 sentence paragraph summarizing the general findings. Mention the range of verdicts (e.g., "True", "Misleading", "False") if there's a mix.
2.  **consensus**: (String) Analyze the verdicts and state the level of agreement. Choose ONE of the following options: {consensus_options}.
3.  **conclusion**: (String) Provide a final, one-sentence takeaway that best represents the collective weight of the provided fact-checks."""


def get_summary_prompt() -> ChatPromptTemplate:
    """
    get the ChatPromptTemplate for claim-review summary synthesis.

    template variables: claim_reviews_json, consensus_options
    """
    return ChatPromptTemplate.from_messages([
        ("system", SUMMARY_SYSTEM_PROMPT),
        ("user", SUMMARY_USER_PROMPT)
    ])
