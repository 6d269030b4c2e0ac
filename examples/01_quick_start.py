#!/usr/bin/env python3
"""
Quick Start Examples: Simplest possible usage of ksubsets

This file walks through stepping between k-subsets, enumerating them, and
checking the count against C(n, k) in both word configurations.
"""
import sys
sys.path.insert(0, "../src")

from ksubsets import (
    ARBITRARY,
    INT64,
    binomial,
    boundary_demonstrations,
    count_k_subsets,
    iter_k_subsets,
    predecessor,
    subset_items,
    successor,
)
from ksubsets.engine.bitset import format_bits

print("=" * 80)
print("QUICK START EXAMPLES")
print("=" * 80)

# ============================================================================
# EXAMPLE 1: One step forward, one step back
# ============================================================================
print("\n" + "=" * 80)
print("EXAMPLE 1: Successor and predecessor")
print("=" * 80)

x = 0b0111
y = successor(x)
print(f"  successor({format_bits(x, 6)}) = {format_bits(y, 6)}")
print(f"  predecessor({format_bits(y, 6)}) = {format_bits(predecessor(y), 6)}")

# ============================================================================
# EXAMPLE 2: All 2-subsets of five items
# ============================================================================
print("\n" + "=" * 80)
print("EXAMPLE 2: Enumerating k-subsets")
print("=" * 80)

fruit = ["apple", "banana", "cherry", "date", "elder"]
for mask in iter_k_subsets(len(fruit), 2):
    print(f"  {format_bits(mask, len(fruit))}  {', '.join(subset_items(mask, fruit))}")
print(f"\n  {count_k_subsets(5, 2)} subsets, C(5, 2) = {binomial(5, 2)}")

# ============================================================================
# EXAMPLE 3: The word-width boundary
# ============================================================================
print("\n" + "=" * 80)
print("EXAMPLE 3: Fixed-width vs arbitrary precision")
print("=" * 80)
print("""
int64 words enumerate exactly up to n = 62. At n = 63 the bound 1 << 63 wraps
negative and the enumeration stops early; Python ints have no such limit.
""")

for result in boundary_demonstrations(INT64):
    print(f"  int64:     {result.describe()}")
for result in boundary_demonstrations(ARBITRARY, ARBITRARY):
    print(f"  arbitrary: {result.describe()}")
