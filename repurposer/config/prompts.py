"""LLM prompt templates, one per target platform.

Templates are filled with ``str.format``; the transcript is passed as a
value, so braces inside it are never interpreted. Every template ends with
the exact section markers the response extractor looks for.
"""

# Common instruction so replies stay parseable by section markers
SECTION_FORMAT_INSTRUCTION = """
OUTPUT FORMAT:
- Put every section marker on its own line, exactly as written below (uppercase, with the colon).
- Write the section content on the lines after its marker.
- Do NOT use markdown headings, bold text or code blocks around the markers.
- No text before the first marker."""

KEYWORD_FOCUS_TEMPLATE = """
FOCUS KEYWORDS (work them in naturally where they fit):
{keywords}
"""

YOUTUBE_TIMESTAMPS_INSTRUCTION = """
4. Create chapter timestamps for the video. The video is {duration} long;
   no timestamp may exceed that duration. The first timestamp is 0:00.
   One chapter per line in the form "M:SS Chapter title"."""

YOUTUBE_TIMESTAMPS_SECTION = """
TIMESTAMPS:
<one chapter per line>"""

YOUTUBE_PROMPT = """You are an experienced YouTube content strategist. Turn the following video transcript into publish-ready YouTube metadata.

TASKS:
1. Correct the transcript: fix punctuation, capitalization and obvious speech-to-text errors. Do not summarize or shorten it.
2. Write a concise, curiosity-driven title (at most 70 characters).
3. Write a description of at most 1500 characters that summarizes the video and ends with a question that invites viewers to comment.{timestamps_instruction}
{keyword_block}
VIDEO TRANSCRIPT:
---
{transcript}
---
""" + SECTION_FORMAT_INSTRUCTION + """

TRANSCRIPT:
<corrected transcript>

TITLE:
<title>

DESCRIPTION:
<description>{timestamps_section}"""

LINKEDIN_PROMPT = """You are a LinkedIn ghostwriter for technology professionals. Turn the following video transcript into a LinkedIn post.

RULES:
1. Length between 1000 and 1500 characters.
2. Professional, first-person tone with a strong opening line.
3. Short paragraphs separated by blank lines.
4. End with a question to the audience, followed by 3-5 relevant hashtags.
{keyword_block}
VIDEO TRANSCRIPT:
---
{transcript}
---
""" + SECTION_FORMAT_INSTRUCTION + """

LINKEDIN POST:
<post>"""

TWITTER_PROMPT = """You are a social media editor. Turn the following video transcript into a single post for X (Twitter).

RULES:
1. At most 280 characters including hashtags.
2. One clear hook, no thread.
3. At most 2 hashtags.

VIDEO TRANSCRIPT:
---
{transcript}
---
""" + SECTION_FORMAT_INSTRUCTION + """

TWITTER POST:
<post>"""

INSTAGRAM_PROMPT = """You are an Instagram content creator. Turn the following video transcript into an Instagram caption.

RULES:
1. Length between 500 and 800 characters.
2. Friendly, direct tone; emojis are allowed but sparing.
3. End with a call to action and a block of 8-12 relevant hashtags.

VIDEO TRANSCRIPT:
---
{transcript}
---
""" + SECTION_FORMAT_INSTRUCTION + """

INSTAGRAM POST:
<caption>"""

TIKTOK_PROMPT = """You are a TikTok creator. Turn the following video transcript into a TikTok caption.

RULES:
1. Length between 150 and 300 characters.
2. Start with a hook that makes people watch until the end.
3. Finish with 4-6 relevant hashtags.
{keyword_block}
VIDEO TRANSCRIPT:
---
{transcript}
---
""" + SECTION_FORMAT_INSTRUCTION + """

TIKTOK POST:
<caption>"""

KEYWORDS_PROMPT = """You are an SEO analyst. Identify the three most important keywords or short key phrases of the following video transcript.

RULES:
1. Exactly 3 keywords, most important first.
2. One keyword per line, no numbering, no bullet points, no explanations.
3. Use the language of the transcript.

VIDEO TRANSCRIPT:
---
{transcript}
---
""" + SECTION_FORMAT_INSTRUCTION + """

KEYWORDS:
<keyword 1>
<keyword 2>
<keyword 3>"""
