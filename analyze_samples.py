#!/usr/bin/env python3
"""
Constats: Sample Analysis Script
================================
Thin entry-point. All logic lives in src.constats.

Usage:
  Random data:   python3 analyze_samples.py -n 100000 --seed 1
  From a file:   python3 analyze_samples.py -i samples.txt
  Quarters:      python3 analyze_samples.py -i samples.npy --split
"""

from src.constats.cli import main

if __name__ == "__main__":
    main()
