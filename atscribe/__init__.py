"""
ATScribe - Applicant Tracking System résumé scribe

Renders structured résumé records into Markdown, plaintext, HTML and JSON, and
scores how well a résumé covers the keywords of a job description.

Architecture:
- Intake Context: Résumé records, (de)serialization, validation, job description loading
- Rendering Context: Markdown rendering and the formats derived from it
- Targeting Context: Keyword coverage scoring and improvement suggestions
"""

__version__ = "0.1.0"
