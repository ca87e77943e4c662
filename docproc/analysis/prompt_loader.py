from pathlib import Path

from docproc.analysis.exceptions import AnalyzerError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt(path: Path | None = None) -> str:
    """Load the image analysis instruction prompt from a file.

    Args:
        path: Path to the prompt file.
              Defaults to the bundled analysis_prompt.txt.

    Returns:
        The prompt text, stripped of surrounding whitespace.

    Raises:
        AnalyzerError: if the file cannot be read or is empty.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "analysis_prompt.txt"
    try:
        prompt = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise AnalyzerError(f"Failed to load analysis prompt: {exc}") from exc
    if not prompt:
        raise AnalyzerError(f"Analysis prompt is empty: {path}")
    return prompt
