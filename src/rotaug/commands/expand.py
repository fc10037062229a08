from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from rotaug.config.loader import load_rotaug_config
from rotaug.manifest.io import default_output_name
from rotaug.manifest.pipeline import augment_filelist
from rotaug.monitoring import configure_logging
from rotaug.utils.config_io import prune_none


def run_expand(args: Any, work_dir: Path) -> int:
    try:
        overrides: dict[str, Any] = {
            "expand": {
                "rotation_step": args.rot_step,
                "sort_output": True if args.sort else None,
                "workers": args.workers,
                "malformed_policy": args.on_malformed,
            },
            "output": {
                "path": args.output,
                "mode": args.output_mode,
            },
            "monitoring": {
                "log_level": "DEBUG" if args.verbose else args.log_level,
                "json_logs": True if args.json_logs else None,
            },
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

        output_path = Path(
            config.output.path
            or default_output_name(
                input_path,
                mode=config.output.mode,
                prefix=config.output.prefix,
                fixed_name=config.output.fixed_name,
            )
        )
        if not output_path.is_absolute():
            output_path = (work_dir / output_path).resolve()

        summary = augment_filelist(input_path, output_path, config)
        print(json.dumps(summary, ensure_ascii=True, indent=2))
        return 0
    except Exception as exc:
        print(f"expand command failed: {exc}", file=sys.stderr)
        return 2
