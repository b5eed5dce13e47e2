"""Benchmark split() and join() on a slice of the Sci-Fi Gutenberg dataset.

Outputs one row per split mode:
  Mode | Corpus Size | Tokens | Split Throughput | Join Throughput
"""

import argparse
import logging
import time

from datasets import load_dataset

from textsplit import SplitOption, get_splitter, join, split, split_lines

HF_DATASET = "stevez80/Sci-Fi-Books-gutenberg"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S",
)


def load_corpus(num_docs: int | None) -> list[str]:
    """Load up to `num_docs` documents via dataset indexing; full dataset when None."""
    print(f"Loading {HF_DATASET} (non-streaming) …")
    ds = load_dataset(HF_DATASET, split="train")
    if num_docs is not None:
        return ds[:num_docs]["text"]
    return ds["text"]


def bench_mode(name: str, docs: list[str], separator: str) -> tuple[int, float, float]:
    """Return (token count, split seconds, join seconds) for one split mode."""
    modes = {
        "char": lambda d: split(d, " "),
        "substring": lambda d: split(d, ". ", SplitOption.TRIM),
        "lines": lambda d: split_lines(d),
        "camel-case": lambda d: get_splitter("camel-case").split(d),
    }
    splitter = modes[name]

    t0 = time.perf_counter()
    tokenized = [splitter(d) for d in docs]
    split_elapsed = time.perf_counter() - t0

    t0 = time.perf_counter()
    for tokens in tokenized:
        join(separator, tokens)
    join_elapsed = time.perf_counter() - t0

    return sum(len(t) for t in tokenized), split_elapsed, join_elapsed


def main() -> None:
    """Run the split/join benchmark and print a markdown table."""
    parser = argparse.ArgumentParser(description="Benchmark textsplit split() and join().")
    parser.add_argument(
        "--num-docs",
        type=int,
        default=100,
        help="Number of documents to split (default: 100).",
    )
    args = parser.parse_args()

    docs = load_corpus(args.num_docs)
    if not docs:
        raise RuntimeError("No documents loaded from dataset.")

    total_bytes = sum(len(d.encode("utf-8")) for d in docs)
    corpus_mb = total_bytes / (1024 * 1024)

    print()
    print(
        f"| {'Mode':12} | {'Corpus Size':12} | {'Tokens':12} "
        f"| {'Split Throughput':18} | {'Join Throughput':18} |"
    )
    print(f"| {'-' * 12} | {'-' * 12} | {'-' * 12} | {'-' * 18} | {'-' * 18} |")
    for mode, sep in [
        ("char", " "),
        ("substring", ". "),
        ("lines", "\n"),
        ("camel-case", ""),
    ]:
        n_tokens, split_secs, join_secs = bench_mode(mode, docs, sep)
        print(
            f"| {mode:12} | {f'{corpus_mb:.2f} MB':12} | {n_tokens:12,} "
            f"| {f'{corpus_mb / max(split_secs, 1e-9):.2f} MB/sec':18} "
            f"| {f'{corpus_mb / max(join_secs, 1e-9):.2f} MB/sec':18} |"
        )
    print()


if __name__ == "__main__":
    main()
