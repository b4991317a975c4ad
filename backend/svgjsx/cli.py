"""svgjsx command line — optimize, generate components and lint single SVG files.

Usage:
    svgjsx optimize icon.svg -o icon.min.svg
    svgjsx component icon.svg -f react -o Icon.tsx
    svgjsx validate icon.svg
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from svgjsx import __version__
from svgjsx.engine.optimizer import SvgOptimizer
from svgjsx.errors import SvgJsxError
from svgjsx.generators import Framework, generate_component
from svgjsx.models.component import GenerationOptions
from svgjsx.svg.validator import validate_svg

logger = logging.getLogger("svgjsx.cli")


def _read(path: str) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def _write(path: str | None, text: str) -> None:
    if path is None:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")
        return
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    logger.info("Wrote %s", path)


def cmd_optimize(args: argparse.Namespace) -> int:
    result = SvgOptimizer().run(
        _read(args.input),
        filename=os.path.basename(args.input),
        camel_case=args.camel_case,
        sanitize=args.sanitize,
    )
    if args.json:
        _write(args.output, result.model_dump_json(indent=2, exclude_none=True))
    else:
        _write(args.output, result.result)

    metrics = result.optimization
    print(
        f"{result.filename}: {metrics.original_size} -> {metrics.optimized_size} bytes ({metrics.saved_percent} saved)",
        file=sys.stderr,
    )
    for warning in result.security_warnings or []:
        print(f"warning: {warning}", file=sys.stderr)
    return 0


def cmd_component(args: argparse.Namespace) -> int:
    framework = Framework(args.framework)
    filename = os.path.basename(args.input)
    svg = _read(args.input)
    if args.optimize:
        svg = SvgOptimizer().run(svg, filename=filename, camel_case=framework is Framework.REACT).result

    options = GenerationOptions(
        component_name=args.name,
        typescript=args.typescript,
        memoize=args.memoize,
        include_props_interface=args.props_interface,
        export_default=args.export_default,
        width=args.width,
        height=args.height,
    )
    component = generate_component(framework, svg, filename, options)
    _write(args.output, component.source_code)
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    result = validate_svg(_read(args.input))
    for issue in result.issues:
        print(f"{issue.severity:<7} {issue.code}: {issue.message}")
        if issue.suggestion:
            print(f"        {issue.suggestion}")
    summary = result.summary
    print(f"{summary.errors} error(s), {summary.warnings} warning(s), {summary.info} info")
    return 0 if result.valid else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="svgjsx", description="SVG optimizer and component generator")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    opt = sub.add_parser("optimize", help="Minify an SVG file")
    opt.add_argument("input", help="SVG file")
    opt.add_argument("-o", "--output", help="Output file (default: stdout)")
    opt.add_argument("--no-camel-case", dest="camel_case", action="store_false", help="Keep kebab-case attributes")
    opt.add_argument("--sanitize", action="store_true", help="Strip scripts, event handlers and dangerous URLs")
    opt.add_argument("--json", action="store_true", help="Print the full result as JSON")
    opt.set_defaults(func=cmd_optimize)

    comp = sub.add_parser("component", help="Generate a framework component")
    comp.add_argument("input", help="SVG file")
    comp.add_argument("-f", "--framework", required=True, choices=[f.value for f in Framework])
    comp.add_argument("-o", "--output", help="Output file (default: stdout)")
    comp.add_argument("--name", help="Component name (default: derived from the filename)")
    comp.add_argument("--js", dest="typescript", action="store_false", help="Emit JavaScript instead of TypeScript")
    comp.add_argument("--no-memo", dest="memoize", action="store_false", help="Do not wrap in memo() (React)")
    comp.add_argument("--no-props-interface", dest="props_interface", action="store_false")
    comp.add_argument("--named-export", dest="export_default", action="store_false")
    comp.add_argument("--width", help="Default width")
    comp.add_argument("--height", help="Default height")
    comp.add_argument("--no-optimize", dest="optimize", action="store_false", help="Use the SVG as-is")
    comp.set_defaults(func=cmd_component)

    val = sub.add_parser("validate", help="Lint an SVG file")
    val.add_argument("input", help="SVG file")
    val.set_defaults(func=cmd_validate)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        return args.func(args)
    except (SvgJsxError, ValueError, OSError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
