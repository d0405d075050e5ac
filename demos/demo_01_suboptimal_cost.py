#!/usr/bin/env python3
"""
CORSO Demo 1: Cost-optimal fluxes below the optimum
===================================================

Network:
  EX_A: -> A        [0, 10]
  R1:   A -> B      [0, 1000]   cost 3
  R2:   B <-> A     [-4, 1000]  backward (A -> B) cost 0.1
  EX_B: B ->        [0, 1000]   objective

The cheap route (R2 backward) has capacity 4. Below 40% of the optimum
everything goes through R2; above it the surplus is routed through R1 and
the total cost rises faster.
"""

import argparse
import logging

import matplotlib.pyplot as plt
import numpy as np
from pathlib import Path

from corso_fba import StoichiometricModel, compute_corso_flux

COLORS = {
    'cost': '#2c3e50',
    'R1': 'blue',
    'R2': 'red',
}


def build_model():
    S = np.array([
        [1, -1,  1,  0],
        [0,  1, -1, -1],
    ], dtype=float)
    return StoichiometricModel(
        metabolites=['A', 'B'],
        reactions=['EX_A', 'R1', 'R2', 'EX_B'],
        S=S,
        lb=[0.0, 0.0, -4.0, 0.0],
        ub=[10.0, 1000.0, 1000.0, 1000.0],
        c=[0.0, 0.0, 0.0, 1.0],
    )


def sweep(model, percentages, costs):
    rows = []
    for p in percentages:
        res = compute_corso_flux(model, 'max', p, 'percentage', costs)
        rows.append({'p': p, 'f': res.f, 'fm': res.fm, 'R1': res.x[1], 'R2': res.x[2]})
    return rows


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--out', default='notes/demo_suboptimal_cost.png')
    parser.add_argument('--svg', action='store_true', help='Also save SVG')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    outdir = Path(args.out).parent
    outdir.mkdir(parents=True, exist_ok=True)

    print("=" * 60)
    print("CORSO Demo 1: cost-optimal fluxes below the optimum")
    print("=" * 60)

    model = build_model()
    # forward costs, then backward costs
    costs = [1.0, 3.0, 1.0, 1.0] + [1.0, 1.0, 0.1, 1.0]

    percentages = np.linspace(5, 100, 20)
    rows = sweep(model, percentages, costs)
    for r in rows:
        print(f"  {r['p']:5.1f}%  f={r['f']:6.3f}  fm={r['fm']:7.3f}  "
              f"R1={r['R1']:6.3f}  R2={r['R2']:7.3f}")

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(10, 4))

    ax1.plot([r['f'] for r in rows], [r['fm'] for r in rows], color=COLORS['cost'], lw=2)
    ax1.set_xlabel('Fixed objective flux $f$', fontsize=11)
    ax1.set_ylabel('Minimized total cost $f_m$', fontsize=11)
    ax1.grid(True, alpha=0.25)

    ax2.plot([r['p'] for r in rows], [r['R1'] for r in rows], color=COLORS['R1'], lw=2, label='R1')
    ax2.plot([r['p'] for r in rows], [r['R2'] for r in rows], color=COLORS['R2'], lw=2, label='R2 (net)')
    ax2.axhline(0.0, color='gray', lw=0.8)
    ax2.set_xlabel('Objective constraint (% of optimum)', fontsize=11)
    ax2.set_ylabel('Net flux', fontsize=11)
    ax2.legend(loc='best', fontsize=9)
    ax2.grid(True, alpha=0.25)

    plt.tight_layout()
    plt.savefig(args.out, dpi=150, bbox_inches='tight')
    print(f"\nSaved: {args.out}")

    if args.svg:
        svg_out = args.out.replace('.png', '.svg')
        plt.savefig(svg_out, format='svg', bbox_inches='tight')
        print(f"Saved: {svg_out}")

    plt.close()


if __name__ == '__main__':
    main()
