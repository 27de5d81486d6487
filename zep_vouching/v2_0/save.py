import json
from pathlib import Path
from typing import Dict, Optional

from zep_vouching.constants import STANDARD_JSON_FORMAT
from zep_vouching.utils import _load_json

SUMMARY_KEYS = ("app", "zepToken", "vouching", "validator", "jurisdiction")


def save(
    output_file: Path, app: Optional[str], jurisdiction, zep_token, validator, vouching
) -> Path:
    """Writes the addresses of the deployed app to the summary file."""
    data = {
        "app": app,
        "zepToken": zep_token.address,
        "vouching": vouching.address,
        "validator": validator.address,
        "jurisdiction": jurisdiction.address,
    }
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, "w") as file:
        json.dump(data, file, **STANDARD_JSON_FORMAT)
    return output_file


def load_summary(output_file: Path) -> Dict[str, Optional[str]]:
    if not Path(output_file).exists():
        raise FileNotFoundError(f"No deployment summary found at {output_file}")
    data = _load_json(output_file)
    return {key: data.get(key) for key in SUMMARY_KEYS}
