"""Prompt and response schema for resume/job-description analysis."""

ANALYSIS_PROMPT = """
Task: Act as an expert Technical Recruiter. Compare the provided Resume and Job Description (JD).

1. Calculate a match percentage (0-100) based on skills, experience, and requirements.
2. Provide a concise summary of the candidate's fit.
3. Identify matching skills found in both documents.
4. Identify missing skills that are required in the JD but not found in the Resume.
5. Give 3-5 specific, actionable improvement tips to help the candidate tailor their resume for this specific role.
6. Detect the job title from the Job Description.

Format the response as a JSON object with the following structure:
{
  "matchPercentage": number,
  "summary": string,
  "matchingSkills": string[],
  "missingSkills": string[],
  "improvementTips": string[],
  "jobTitleDetected": string
}

The input for Resume and Job Description might be text or an image.
Analyze the contents carefully.
""".strip()

_STRING_ARRAY = {"type": "ARRAY", "items": {"type": "STRING"}}

RESPONSE_FIELDS = (
    "matchPercentage",
    "summary",
    "matchingSkills",
    "missingSkills",
    "improvementTips",
    "jobTitleDetected",
)

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "matchPercentage": {"type": "NUMBER"},
        "summary": {"type": "STRING"},
        "matchingSkills": _STRING_ARRAY,
        "missingSkills": _STRING_ARRAY,
        "improvementTips": _STRING_ARRAY,
        "jobTitleDetected": {"type": "STRING"},
    },
    "required": list(RESPONSE_FIELDS),
}


def segment_header(label: str) -> str:
    return f"--- {label} ---"
