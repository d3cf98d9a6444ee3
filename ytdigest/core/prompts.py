"""
Prompt templates for chunk and final summarization.
"""

SYSTEM_PROMPT = (
    "You are a direct and concise summarizer. Respond only with the summary, "
    "without any prefixes or meta-commentary. Keep all markdown formatting intact."
)

SECTION_SEPARATOR = "\n\n=== Next Section ===\n\n"

GERMAN_LANGUAGES = {"de", "de-de", "german", "deutsch"}

chunk_template = """Create a detailed summary of section {number} in {language}.
Maintain all important information, arguments, and connections.
Pay special attention to:
- Main topics and arguments
- Important details and examples
- Connections with other mentioned topics
- Key statements and conclusions

Text: {text}"""

video_template = """Combine the following section summaries of a YouTube video into one coherent summary in {language}.
Use exactly this structure and keep the markers:

🎯 {title}: <a short, descriptive title>

🎯 {overview}:
<two or three sentences describing what the video is about>

🎯 {key_points}:
- <the most important points, arguments and examples>

🎯 {conclusion}:
<the main takeaway of the video>

Section summaries:
{text}"""

podcast_template = """Turn the following section summaries of a podcast episode into one coherent summary in {language}.
Use exactly this structure and keep the markers:

🎙️ {title}: <a short, descriptive title>

🎙️ {participants}:
<hosts and guests, if they can be identified>

🎙️ {topics}:
- <the topics discussed, in order>

🎙️ {quotes}:
- <notable statements>

🎙️ {takeaways}:
- <what a listener should remember>

Section summaries:
{text}"""

HEADINGS = {
    "en": {
        "title": "TITLE",
        "overview": "OVERVIEW",
        "key_points": "KEY POINTS",
        "conclusion": "CONCLUSION",
        "participants": "PARTICIPANTS",
        "topics": "TOPICS",
        "quotes": "QUOTES",
        "takeaways": "TAKEAWAYS",
    },
    "de": {
        "title": "TITEL",
        "overview": "ÜBERBLICK",
        "key_points": "KERNPUNKTE",
        "conclusion": "FAZIT",
        "participants": "TEILNEHMER",
        "topics": "THEMEN",
        "quotes": "ZITATE",
        "takeaways": "ERKENNTNISSE",
    },
}

MODE_TEMPLATES = {
    "video": video_template,
    "podcast": podcast_template,
}


def build_chunk_prompt(index: int, language: str, text: str) -> str:
    """Prompt for summarizing one chunk (``index`` is 0-based)."""
    return chunk_template.format(number=index + 1, language=language, text=text)


def build_summary_prompt(text: str, language: str, mode: str) -> str:
    """Prompt for combining the chunk summaries, selected by mode."""
    template = MODE_TEMPLATES.get((mode or "").lower(), video_template)
    headings = HEADINGS["de" if (language or "").strip().lower() in GERMAN_LANGUAGES else "en"]
    return template.format(language=language, text=text, **headings)
