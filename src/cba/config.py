"""Report configuration.

Settings that change how results look, not how they are calculated:
currency symbol, decimal places, the narrative wording for an absent
ratio, the CSV download name and the log level.

A config file is named report.yaml, report.yml or report.json and is
looked up in CBA_CONFIG_DIR, then ./config, then the copy shipped with
the package. Keys left out of a file keep their defaults.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG_NAME = "report"
YAML_SUFFIXES = (".yaml", ".yml")
CONFIG_SUFFIXES = YAML_SUFFIXES + (".json",)


@dataclass
class ReportConfig:
    """Display and export settings.

    Attributes:
        currency_symbol: Prefix for benefits, costs and NPV ("" for none).
        currency_decimals: Decimal places for benefits, costs and NPV.
        ratio_decimals: Decimal places for BCR and ROI.
        missing_ratio_text: Narrative wording for an absent ratio.
        export_filename: Suggested name for the CSV download.
        log_level: Logging level name, e.g. "INFO".
    """

    currency_symbol: str = ""
    currency_decimals: int = 0
    ratio_decimals: int = 2
    missing_ratio_text: str = "n/a"
    export_filename: str = "treatment_results.csv"
    log_level: str = "INFO"


def _require_known_suffix(config_path: Path) -> None:
    if config_path.suffix not in CONFIG_SUFFIXES:
        raise ValueError(
            f"{config_path.name}: report config must end in "
            f"{', '.join(CONFIG_SUFFIXES)}"
        )


def load_report_config(config_path: Path) -> ReportConfig:
    """Read a ReportConfig from a YAML or JSON file.

    Raises:
        FileNotFoundError: If the file is missing.
        ValueError: If the suffix is not .yaml, .yml or .json.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"No report config at {config_path}")
    _require_known_suffix(config_path)

    text = config_path.read_text()
    if config_path.suffix in YAML_SUFFIXES:
        data: Optional[Dict[str, Any]] = yaml.safe_load(text)
    else:
        data = json.loads(text)

    return ReportConfig(**(data or {}))


def save_report_config(config: ReportConfig, config_path: Path) -> None:
    """Write a ReportConfig as YAML or JSON, chosen by file suffix.

    Raises:
        ValueError: If the suffix is not .yaml, .yml or .json.
    """
    _require_known_suffix(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = asdict(config)
    if config_path.suffix in YAML_SUFFIXES:
        config_path.write_text(yaml.safe_dump(data, sort_keys=False))
    else:
        config_path.write_text(json.dumps(data, indent=2))


def get_default_config_dir() -> Path:
    """Directory searched for report.* when none is given."""
    env_dir = os.environ.get("CBA_CONFIG_DIR")
    if env_dir:
        return Path(env_dir)

    local_dir = Path.cwd() / "config"
    if local_dir.exists():
        return local_dir

    return Path(__file__).parent / "default_config"


def find_config_file(config_dir: Optional[Path] = None) -> Optional[Path]:
    """First report.yaml / report.yml / report.json in the directory."""
    search_dir = config_dir if config_dir is not None else get_default_config_dir()
    for suffix in CONFIG_SUFFIXES:
        candidate = search_dir / f"{DEFAULT_CONFIG_NAME}{suffix}"
        if candidate.exists():
            return candidate
    return None


def get_report_config(config_dir: Optional[Path] = None) -> ReportConfig:
    """Load the report config for this session, falling back to defaults."""
    config_path = find_config_file(config_dir)
    if config_path is None:
        return ReportConfig()
    return load_report_config(config_path)


def setup_logging(config: ReportConfig) -> None:
    """Configure root logging at the configured level."""
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
