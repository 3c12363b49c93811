#!/usr/bin/env python3
"""
Demo script to rewrite every row of a CSV file through the local model.
"""

import sys

from humanizer.processor import RewriteProcessor

csv_path = sys.argv[1] if len(sys.argv) > 1 else "data/texts.csv"

# Process CSV file
print("\n" + "="*80)
print("HUMANIZER DEMO - Processing CSV File")
print("="*80)

# Server settings come from the environment / .env
with RewriteProcessor() as processor:
    results = processor.process_csv(csv_path)
    if len(sys.argv) > 2:
        processor.save_results(results, sys.argv[2])
        print(f"\nResults written to {sys.argv[2]}")

print(f"\nProcessing complete! Processed {len(results)} texts.")
