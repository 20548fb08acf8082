from .cli import apply_overrides, build_parser, parse_args, run

__all__ = ["apply_overrides", "build_parser", "parse_args", "run"]
