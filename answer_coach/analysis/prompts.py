"""
Analysis prompt templates.

Prompts are kept separate from the business logic for easier maintenance
and editing.
"""

from ..models import InterviewQuestion


class AnalysisPrompts:
    """Collection of answer analysis prompts."""

    @staticmethod
    def report_schema() -> str:
        """JSON shape the model must return."""
        return """
{
  "overallScore": <number 0-100>,
  "feedback": {
    "strengths": [<array of 3-5 specific strengths>],
    "weaknesses": [<array of 2-4 areas for improvement>],
    "suggestions": [<array of 3-5 actionable recommendations>],
    "detailedFeedback": "<2-3 sentence comprehensive feedback>"
  },
  "scores": {
    "clarity": <number 0-100>,
    "relevance": <number 0-100>,
    "structure": <number 0-100>,
    "completeness": <number 0-100>,
    "confidence": <number 0-100>
  },
  "keyPoints": {
    "covered": [<key points addressed>],
    "missed": [<important points not mentioned>]
  },
  "timeManagement": {
    "efficiency": "<excellent|good|average|poor>",
    "pacing": "<brief description of timing>"
  }
}
        """.strip()

    @staticmethod
    def answer_analysis(question: InterviewQuestion,
                        transcript: str,
                        duration: float,
                        confidence: float) -> str:
        """Main prompt asking the model to grade one answer."""
        skills = ", ".join(question.skills) if question.skills else "general communication"

        return f"""
You are an expert interview coach analyzing a candidate's response. Provide comprehensive feedback.

QUESTION DETAILS:
- Question: "{question.question}"
- Type: {question.type}
- Difficulty: {question.difficulty}
- Skills Evaluated: {skills}
- Expected Duration: {question.expected_duration} seconds
- Category: {question.category}

CANDIDATE'S RESPONSE:
- Transcript: "{transcript}"
- Actual Duration: {duration:g} seconds
- Transcription Confidence: {round(confidence * 100)}%

ANALYSIS INSTRUCTIONS:
Provide your analysis in **valid JSON format only**. No markdown, no code blocks, just pure JSON:

{AnalysisPrompts.report_schema()}

SCORING CRITERIA:
- Clarity: How clear and articulate is the response
- Relevance: How well the answer addresses the question
- Structure: Logical flow and organization
- Completeness: Thoroughness of the response
- Confidence: Perceived conviction and assertiveness

Return ONLY the JSON object, no additional text.
        """.strip()
