"""Prompt template for the Gemini ATS assessment."""

TRUNCATION_MARKER = "... [truncated]"


def truncate_resume(resume_text: str, max_chars: int) -> str:
    """Cut the resume to ``max_chars`` characters, marking the cut."""
    if len(resume_text) <= max_chars:
        return resume_text
    return resume_text[:max_chars] + TRUNCATION_MARKER


def build_ats_prompt(resume_text: str, max_chars: int = 8000) -> str:
    """ATS compatibility assessment of a single resume, no job description."""
    resume_text = truncate_resume(resume_text, max_chars)

    return f"""You are an expert ATS (Applicant Tracking System) analyst.

Assess how well this resume will be parsed and ranked by a typical ATS.
Judge only what is in the text. Do not invent content that is not there.

SCORING GUIDE (follow strictly):
- 0-20:  Unreadable or missing core sections (contact, experience).
- 20-40: Major structural problems; an ATS would lose important content.
- 40-60: Parseable but with several gaps (no metrics, weak verbs, missing sections).
- 60-80: Solid resume with minor issues.
- 80-100: Clean structure, strong keywords, quantified achievements.

RESUME:
---
{resume_text}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "format_analysis": {{
    "score": <integer 0-100>,
    "has_appropriate_structure": <true|false>,
    "issues": [<formatting problems an ATS would trip on>]
  }},
  "keyword_analysis": {{
    "total_unique_keywords": <integer, distinct hard skills, tools and domain terms>,
    "industry_alignment": "<high|medium|low>",
    "keyword_density": "<too_sparse|optimal|too_dense>"
  }},
  "contact_information": {{
    "email_found": <true|false>,
    "email_location": "<top|middle|bottom>",
    "phone_found": <true|false>,
    "phone_location": "<top|middle|bottom>",
    "linkedin_found": <true|false>,
    "linkedin_format_correct": <true|false>,
    "github_found": <true|false>,
    "location_found": <true|false>
  }},
  "content_quality": {{
    "score": <integer 0-100>,
    "estimated_word_count": <integer>,
    "quantifiable_achievements": <true|false>,
    "achievement_examples": [<up to 5 achievement lines quoted from the resume>],
    "uses_action_verbs": <true|false>,
    "action_verb_examples": [<up to 5 action verbs used>],
    "appropriate_length": <true|false>,
    "has_bullet_points": <true|false>
  }},
  "ats_red_flags": [<problems that would make an ATS reject or misread the resume>],
  "critical_fixes_required": [<must-fix items, most important first>],
  "recommended_improvements": [<concrete, specific suggestions>],
  "overall_assessment": {{
    "ats_compatibility_score": <integer 0-100>,
    "summary": "<2-3 sentence assessment>"
  }}
}}"""
