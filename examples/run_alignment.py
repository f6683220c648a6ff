"""
Tiny helper script to eyeball the three alignment modes side by side.
"""

from __future__ import annotations

from text_aligner import AlignMode, render


def main() -> None:
    samples = [
        "The cat sat on the mat. It was raining outside, but the cat was warm and happy.",
        "Quantum entanglement is a physical phenomenon that occurs when particles share proximity in ways such that their states cannot be described independently.",
    ]

    for sample in samples:
        for mode in AlignMode:
            print("-" * 30)
            print(f"{mode.value}:")
            for line in render(sample, 30, mode):
                print(f"|{line}|")


if __name__ == "__main__":
    main()
