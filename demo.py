#!/usr/bin/env python3
"""
shortgames Demo

Walks through the engine:
1. Minimum excludant over naturals and ordinals
2. Game trees: negation and disjoint sums
3. Nim heaps and the nim-sum law
4. Order relations between short games
5. Grundy values and the Sprague-Grundy theorem
"""

print("""
╔══════════════════════════════════════════════════════════════════════════════╗
║                                                                              ║
║                 shortgames: Finite Combinatorial Game Engine                 ║
║                                                                              ║
║             mex · Grundy values · nim-sums · Conway's game order             ║
║                                                                              ║
╚══════════════════════════════════════════════════════════════════════════════╝
""")

# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 1: MINIMUM EXCLUDANT
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 1: MINIMUM EXCLUDANT")
print("═" * 80)

from shortgames import mex, Ordinal, cantor_normal_form

print("""
mex(S) is the least natural number missing from S. It is the building block
of Grundy values: a position's value is the mex of its options' values.
""")

for values in [set(), {0, 1, 3}, {1, 2, 3}, {0, 1, 2, 3, 4}]:
    print(f"  mex({sorted(values)}) = {mex(values)}")

ordinal_values = [0, 1, Ordinal.omega(), Ordinal.omega_power(2)]
print(f"\n  Over ordinals: mex({ordinal_values}) = {mex(ordinal_values)}")
print(f"  Base-3 Cantor normal form of 100: {cantor_normal_form(100, 3)}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 2: GAME TREES
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 2: GAME TREES")
print("═" * 80)

from shortgames import GameTree, zero, star, integer, negate, disjoint_sum, count_positions

up = GameTree((zero(),), (star(),))
positions = [
    ("0", zero()),
    ("*", star()),
    ("1", integer(1)),
    ("-2", integer(-2)),
    ("↑", up),
    ("-↑", negate(up)),
]

print("\n  Positions in Conway notation {Left options | Right options}:")
print("  " + "-" * 50)
for name, game in positions:
    print(f"  {name:4} = {game!r:24} birthday {game.birthday}")

total = disjoint_sum(integer(1), star())
print(f"\n  1 + * = {total!r}")
print(f"  distinct positions in 1 + *: {count_positions(total)}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 3: NIM
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 3: NIM HEAPS AND NIM-SUMS")
print("═" * 80)

from shortgames import nim_heap, nim_sum, nim_sum_table, nim_winning_move

print(f"\n  *3 = {GameTree(nim_heap(3).left, nim_heap(3).right)!r}")
print("\n  Nim-sum table (n XOR m):")
for row in nim_sum_table(8):
    print("   " + " ".join(f"{value:2d}" for value in row))

print("\n  Winning moves in multi-heap Nim:")
print("  " + "-" * 50)
for heaps in [(3, 4, 5), (1, 2, 3), (2, 7, 9)]:
    move = nim_winning_move(heaps)
    verdict = "second player wins" if move is None else f"shrink heap {move[0]} to {move[1]}"
    print(f"  heaps {heaps}: nim-sum {nim_sum(*heaps):2d} -> {verdict}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 4: ORDER RELATIONS
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 4: ORDER RELATIONS")
print("═" * 80)

from shortgames import ShortGameOracle

oracle = ShortGameOracle()
comparisons = [
    ("*1", nim_heap(1), "0", zero()),
    ("*3 + *3", nim_heap(3) + nim_heap(3), "0", zero()),
    ("1", integer(1), "0", zero()),
    ("↑", up, "*", star()),
    ("*1 + *2", nim_heap(1) + nim_heap(2), "*3", nim_heap(3)),
]

print()
for left_name, left, right_name, right in comparisons:
    relation = oracle.compare(left, right)
    print(f"  {left_name:8} {relation.symbol} {right_name:4} ({relation.name})")

print("\n  Outcome classes:")
for name, game in positions:
    print(f"  {name:4}: {oracle.outcome(game).name}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 5: GRUNDY VALUES
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 5: GRUNDY VALUES (SPRAGUE-GRUNDY)")
print("═" * 80)

from shortgames import GrundyEvaluator, nim_position, NotImpartialError

evaluator = GrundyEvaluator(oracle=oracle)

print()
for heaps in [(1, 2), (3, 3), (3, 5), (1, 2, 4)]:
    game = nim_position(heaps)
    value = evaluator.grundy_value(game)
    print(f"  grundy(Nim{heaps}) = {value}, "
          f"≈ *{value}: {evaluator.verify_equivalence(game)}, "
          f"winning moves: {len(evaluator.winning_moves(game))}")

try:
    evaluator.grundy_value(integer(1))
except NotImpartialError as error:
    print(f"\n  grundy(1) rejected: {error}")

print("\n" + "═" * 80)
print("  DEMO COMPLETE")
print("═" * 80 + "\n")
