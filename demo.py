"""
Ordered Tree Demo -- Tree printing, predecessor/successor walk, deletion cases,
and the random-tree height experiment.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from ordered_tree import OrderedTree
from tree_printer import format_tree, format_in_order
from height_experiment import ExperimentConfig, run_experiment, asymptotic_height_estimate

SEED = 42

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

DRIVER_KEYS = [100, 50, 150, 70, 30, 130, 140, 120]
TEXTBOOK_KEYS = [44, 17, 8, 32, 28, 21, 29, 88, 65, 54, 82, 76, 68, 80, 97, 93]


def example_1_printing():
    """Build the driver tree and print it both ways."""
    print("=" * 60)
    print("Example 1: Printing a Tree")
    print("=" * 60)

    tree = OrderedTree()
    for key in DRIVER_KEYS:
        tree.insert(key)

    print(f"Number of nodes is: {tree.size()}")
    print("Print tree horizontally using indentation:")
    print(format_tree(tree))
    print("\nPrint tree by inorder traversal:")
    print(format_in_order(tree))

    return tree


def example_2_neighbours():
    """Walk the textbook tree with predecessor and successor."""
    print("\n" + "=" * 60)
    print("Example 2: Predecessor / Successor")
    print("=" * 60)

    tree = OrderedTree()
    for key in TEXTBOOK_KEYS:
        tree.insert(key)

    node = tree.find(44)
    print(f"predecessor(44) = {tree.predecessor(node).element}")
    print(f"successor(44)   = {tree.successor(node).element}")

    walk = []
    node = tree.find(tree.min())
    while node is not None:
        walk.append(node.element)
        node = tree.successor(node)
    print(f"successor walk: {walk}")

    return tree


def example_3_deletion():
    """Delete nodes with zero, one and two children."""
    print("\n" + "=" * 60)
    print("Example 3: Deletion")
    print("=" * 60)

    tree = OrderedTree()
    for key in TEXTBOOK_KEYS:
        tree.insert(key)

    for key in (8, 76, 32, 1000):
        node = tree.find(key)
        kind = "absent" if node is None else f"{tree.num_children(node)} children"
        removed = tree.delete(key)
        print(f"delete({key}) [{kind}] -> {removed}, size={tree.size()}")
    print(format_tree(tree))

    return tree


def example_4_height_experiment():
    """Height distribution of random trees."""
    print("\n" + "=" * 60)
    print("Example 4: Random Tree Heights")
    print("=" * 60)

    config = ExperimentConfig(seed=SEED)
    report = run_experiment(config)
    for height, size in zip(report.heights, report.sizes):
        print(f"Height = {height}, Size = {size}")
    print()
    print(report.summary())

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    bins = np.arange(report.min_height, report.max_height + 2) - 0.5
    axes[0].hist(report.heights, bins=bins, color="steelblue", edgecolor="white")
    axes[0].axvline(report.mean_height, color="red", linestyle="--", linewidth=2,
                    label=f"Mean = {report.mean_height:.2f}")
    axes[0].axvline(asymptotic_height_estimate(config.n_nodes), color="green", linestyle=":", linewidth=2,
                    label="Asymptotic estimate (4.311 ln n - 1.953 ln ln n)")
    axes[0].set_xlabel("Height")
    axes[0].set_ylabel("Trees")
    axes[0].set_title(f"Heights of {config.n_trees} Random Trees ({config.n_nodes} inserts)")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].scatter(report.sizes, report.heights, alpha=0.6, color="steelblue")
    axes[1].set_xlabel("Size (distinct keys)")
    axes[1].set_ylabel("Height")
    axes[1].set_title("Height vs Size")
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_height_distribution.png", dpi=150)
    plt.close(fig)

    return report


def example_5_height_growth():
    """Mean height as the number of inserted keys grows."""
    print("\n" + "=" * 60)
    print("Example 5: Height Growth")
    print("=" * 60)

    node_counts = [10, 30, 100, 300, 1000, 3000]
    means = []
    for n in node_counts:
        report = run_experiment(ExperimentConfig(n_trees=30, n_nodes=n, seed=SEED))
        means.append(report.mean_height)
        print(f"n = {n:5d}: mean height = {report.mean_height:.2f}, "
              f"asymptotic estimate ~{asymptotic_height_estimate(n):.2f}")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(node_counts, means, "o-", color="steelblue", linewidth=2, label="Measured mean height")
    ax.plot(node_counts, [asymptotic_height_estimate(n) for n in node_counts], "g--", linewidth=2,
            label="Asymptotic estimate (4.311 ln n - 1.953 ln ln n)")
    ax.set_xscale("log")
    ax.set_xlabel("Inserted keys (log scale)")
    ax.set_ylabel("Height")
    ax.set_title("Random BST Height Growth")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_height_growth.png", dpi=150)
    plt.close(fig)

    return means


def generate_pdf_report(report):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Ordered Tree", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Unbalanced Binary Search Tree", fontsize=24, ha="center")
        fig.text(0.5, 0.35, "Random Height Experiment Report", fontsize=18, ha="center", style="italic")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Summary", fontsize=24, ha="center", fontweight="bold")
        summary_text = f"""
Trees built:        {report.config.n_trees}
Inserts per tree:   {report.config.n_nodes}
Key range:          [0, {report.config.max_value})

Mean height:        {report.mean_height:.2f}
Std deviation:      {report.std_height:.2f}
Min / max height:   {report.min_height} / {report.max_height}
Mean size:          {report.mean_size:.1f}
Asymptotic estimate: {asymptotic_height_estimate(report.config.n_nodes):.2f}

A degenerate tree with the same keys would have height {report.config.n_nodes - 1}.
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in sorted(VIZ_DIR.glob("*.png")):
            fig = plt.figure(figsize=(11, 8.5))
            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"PDF report saved to: {pdf_path}")


def main():
    print("Ordered Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_printing()
    example_2_neighbours()
    example_3_deletion()
    report = example_4_height_experiment()
    example_5_height_growth()
    generate_pdf_report(report)

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
