"""Prompt templates sent to the generative service."""

RESUME_ANALYSIS_PROMPT = """You are an AI resume analysis system.
Analyze the resume below and return only valid JSON matching this schema (no markdown, no code block):
{{
  "summary": "A brief 2-3 sentence summary of the candidate",
  "skills": {{
    "technical": ["list of technical skills"],
    "soft": ["list of soft skills"],
    "tools": ["list of tools and technologies"]
  }},
  "experience": {{
    "years": "estimated years of experience",
    "level": "junior/mid/senior/lead/executive",
    "highlights": ["key achievements and responsibilities"]
  }},
  "education": {{
    "degree": "highest degree obtained",
    "field": "field of study",
    "institution": "institution name"
  }},
  "strengths": ["list of candidate's key strengths"],
  "areas_for_improvement": ["suggestions for resume improvement"],
  "score": "numerical score from 1-100",
  "recommendations": ["specific recommendations for the candidate"]
}}
Focus on actionable insights. If a field cannot be determined, use empty string or empty array as appropriate.

Resume text:
{resume_text}
"""

RESUME_SUGGESTIONS_PROMPT = """Provide specific, actionable suggestions to improve this resume.
Focus on:
1. Content improvements
2. Formatting suggestions
3. Skills to highlight
4. Experience descriptions
5. Overall presentation

Resume text:
{resume_text}

Please provide 5-7 specific suggestions in a clear, actionable format.
"""

JOB_COMPARISON_PROMPT = """Compare this resume against the job description and provide a detailed analysis.
Return only valid JSON matching this schema (no markdown, no code block):
{{
  "match_score": "percentage match (1-100)",
  "matching_skills": ["skills that match the job requirements"],
  "missing_skills": ["skills mentioned in job but not in resume"],
  "strengths": ["what makes this candidate a good fit"],
  "concerns": ["potential concerns or gaps"],
  "recommendations": ["specific recommendations to improve fit"]
}}

Resume:
{resume_text}

Job Description:
{job_description}
"""
