from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from rotaug.config.loader import load_rotaug_config
from rotaug.errors import OutputWriteError
from rotaug.manifest.pipeline import list_categories
from rotaug.monitoring import configure_logging
from rotaug.utils.config_io import prune_none


def _write_categories(path: Path, categories: list[str]) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("".join(f"{name}\n" for name in categories), encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"Cannot write output {path}: {exc}") from exc


def run_categories(args: Any, work_dir: Path) -> int:
    try:
        overrides = {
            "expand": {"malformed_policy": args.on_malformed},
            "monitoring": {"log_level": "DEBUG" if args.verbose else None},
        }
        config = load_rotaug_config(
            work_dir=work_dir,
            config_path=args.config,
            cli_overrides=prune_none(overrides),
        )
        configure_logging(config.monitoring.log_level, config.monitoring.json_logs)

        input_path = Path(args.filelist)
        if not input_path.is_absolute():
            input_path = (work_dir / input_path).resolve()

        summary = list_categories(input_path, config)
        if args.output:
            output_path = Path(args.output)
            if not output_path.is_absolute():
                output_path = (work_dir / output_path).resolve()
            _write_categories(output_path, summary["categories"])
            summary["output"] = str(output_path)

        print(json.dumps(summary, ensure_ascii=True, indent=2))
        return 0
    except Exception as exc:
        print(f"categories command failed: {exc}", file=sys.stderr)
        return 2
