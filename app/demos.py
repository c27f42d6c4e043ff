"""
Catalogue of the demos listed on the showcase home page
"""
from typing import List

from app.pydantic.demo import Demo

DEMOS: List[Demo] = [
    Demo(
        title="cataloger",
        description=(
            "A tool for extracting and cataloging snowboards from PDF files."
            "<p>Simply drag and drop a PDF catalog. It parses the PDF, uses the "
            "FAL.ai SAM-3 API to extract snowboards, and calls the Gemini API to "
            "identify their names automatically.</p>"
        ),
        path="/of/cataloger",
        yearMonth="2026-02",
    ),
    Demo(
        title="imager",
        description=(
            "A powerful browser-based image manipulation tool."
            "<p>Features include background removal using color or corner detection, "
            "cropping, scaling, padding, rotating, and auto-trimming. "
            "All processing happens locally in the browser.</p>"
        ),
        path="/of/imager",
        yearMonth="2026-02",
    ),
    Demo(
        title="mutant",
        description=(
            "A basic AI chat interface that evolves and mutates over time."
            "<p>Starting as a simple chat UI, this demo explores how an AI conversation "
            "interface can transform and adapt based on user interactions.</p>"
        ),
        path="/of/mutant",
        yearMonth="2025-10",
    ),
    Demo(
        title="multiplayer",
        description=(
            "Exploration of multiplayer AI interaction using an LLM."
            "<p>Can an LLM figure out in a conversation with multiple bots and humans, "
            "when to respond and when to let the others speak.</p>"
        ),
        path="/of/multiplayer",
        yearMonth="2025-09",
    ),
    Demo(
        title="navigator",
        description=(
            "Exploration of a conceptual browser for an LLM. Look into what the LLM "
            "knows through a browser interface rather than chat."
            "<p>If every bit of information inside the LLM could be referenced through "
            "a prompt, then maybe you could browse the LLM if every prompt is a URL.</p>"
        ),
        path="/of/navigator",
        yearMonth="2025-09",
    ),
    Demo(
        title="metro",
        description=(
            "Vibe-coded metro map editor."
            "<p>Could you create a fairly complex UX through vibe-coding? After several "
            "days of continuous prompting, the current crop of LLMs still does not do "
            "well with UX patterns.</p>"
        ),
        path="/of/metro",
        yearMonth="2025-08",
    ),
    Demo(
        title="codepoet",
        description=(
            "Exploration of how code could be translated into poems and then back to code."
            "<p>Could you prompt an LLM through poetry to generate code? Could code be "
            "represented as poetry?</p>"
        ),
        path="/of/codepoet",
        yearMonth="2025-07",
    ),
    Demo(
        title="threetextfield",
        description="Exploration of a hyper fancy text box and what it would take to make it work.",
        path="/of/number",
        yearMonth="2025-07",
    ),
    Demo(
        title="terminal",
        description="A fake terminal interface that could be extensible.",
        path="/of/terminal",
        yearMonth="2025-07",
    ),
]


def list_demos() -> List[Demo]:
    """Newest first; demos from the same month keep their listed order"""
    return sorted(DEMOS, key=lambda d: d.yearMonth, reverse=True)
