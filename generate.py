"""
Seal Generation Script

Generates one seal PNG per company name.

Configuration is loaded from config/pipeline.json; command-line flags
override it. Company names are read from a comma-separated text file.
Output files are named after the company, with filesystem-unsafe characters
replaced by underscores. If no names are found, a single default seal is
generated instead.

No font file ships with the package. Pass one with --font (or set font_path
in the config) to draw with it; otherwise text uses whatever fontconfig
resolves for the template's font family.
"""

import argparse
import multiprocessing
import re
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from tqdm import tqdm

from config import BatchConfig, SealConfig, load_config
from rendering import SealGenerator

UNSAFE_CHARS = re.compile(r'[\\/:*?"<>|\s]')

SealTask = Tuple[SealConfig, Optional[str], str]


def read_company_names(path: str) -> List[str]:
    """Read comma-separated company names; a missing file means no names."""
    names_path = Path(path)
    if not names_path.exists():
        return []

    content = names_path.read_text(encoding='utf-8')
    return [name.strip() for name in content.split(',') if name.strip()]


def safe_file_name(name: str) -> str:
    return UNSAFE_CHARS.sub('_', name)


def build_tasks(batch: BatchConfig, names: List[str]) -> List[SealTask]:
    if not names:
        return [(batch.seal_config(batch.default_company), batch.font_path,
                 str(batch.default_output_path))]

    return [
        (batch.seal_config(name), batch.font_path,
         str(batch.seal_output_path(safe_file_name(name))))
        for name in names
    ]


def generate_seal_wrapper(task: SealTask) -> Tuple[str, Optional[str]]:
    """Generate one seal. Returns (output_path, error message or None)."""
    seal_config, font_path, output_path = task
    try:
        SealGenerator(seal_config, font_path=font_path).generate(output_path)
    except OSError as e:
        return output_path, str(e)
    return output_path, None


def run_batch(batch: BatchConfig, tasks: List[SealTask]) -> List[Tuple[str, Optional[str]]]:
    if batch.workers > 1 and len(tasks) > 1:
        print(f"Rendering with {batch.workers} workers...")
        with multiprocessing.Pool(processes=batch.workers) as pool:
            return list(tqdm(pool.imap(generate_seal_wrapper, tasks),
                             total=len(tasks), desc="Generating seals (Parallel)"))

    return [generate_seal_wrapper(task) for task in tqdm(tasks, desc="Generating seals")]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate company seal images.")
    parser.add_argument('--config', type=str, default='config/pipeline.json',
                        help='Batch config JSON (default: config/pipeline.json)')
    parser.add_argument('--names', type=str, default=None,
                        help='Comma-separated company names file')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory for generated seals')
    parser.add_argument('--font', type=str, default=None,
                        help='TTF/OTF font file to register for text')
    parser.add_argument('--workers', type=int, default=None,
                        help='Number of parallel worker processes')
    parser.add_argument('--aging', action=argparse.BooleanOptionalAction, default=None,
                        help='Enable or disable the aging effect')
    args = parser.parse_args(argv)

    batch = load_config(args.config)
    if args.names is not None:
        batch.names_file = args.names
    if args.output_dir is not None:
        batch.output_dir = args.output_dir
    if args.font is not None:
        batch.font_path = args.font
    if args.workers is not None:
        batch.workers = max(1, args.workers)
    if args.aging is not None:
        batch.template = batch.template.replace(aging=args.aging)

    batch.create_output_dirs()

    names = read_company_names(batch.names_file)
    print(f"Names file: {batch.names_file} ({len(names)} companies)")
    print(f"Output: {batch.output_path}")
    print()

    tasks = build_tasks(batch, names)
    results = run_batch(batch, tasks)

    failures = 0
    for output_path, error in results:
        if error is not None:
            failures += 1
            print(f"Failed: {output_path}: {error}")
        elif names:
            print(f"Seal generated: {output_path}")
        else:
            print(f"No company names found, generated default seal: {output_path}")

    return 1 if failures else 0


if __name__ == '__main__':
    sys.exit(main())
