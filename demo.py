"""
Search Tree Demo -- Reference scenarios, successor-based removal, shape versus
insertion order, and leaf-count distribution for an unbalanced BST.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from search_tree import SearchTree, EmptyTreeError

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

REFERENCE = [50, 30, 70, 20, 40, 60, 80]
WITH_DUPLICATES = [50, 30, 70, 20, 40, 60, 80, 30, 80]
SIZES = [8, 16, 32, 64, 128, 256, 512]
TRIALS = 30


def _layout(tree):
    """Map each value to (in-order rank, depth) and collect parent-child edges."""
    positions = {}
    edges = []
    rank = 0
    stack = []
    node, depth = tree._root, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        positions[node.value] = (rank, depth)
        rank += 1
        for child in (node.left, node.right):
            if child is not None:
                edges.append((node.value, child.value))
        node, depth = node.right, depth + 1
    return positions, edges


def _draw_tree(ax, tree, title, highlight=()):
    positions, edges = _layout(tree)
    for parent, child in edges:
        (x0, y0), (x1, y1) = positions[parent], positions[child]
        ax.plot([x0, x1], [-y0, -y1], color=COLORS["dark"], linewidth=1.2, zorder=1)
    for value, (x, y) in positions.items():
        color = COLORS["orange"] if value in highlight else COLORS["blue"]
        ax.scatter([x], [-y], s=700, color=color, edgecolor="white", zorder=2)
        ax.text(x, -y, str(value), ha="center", va="center", fontsize=10,
                fontweight="bold", color="white", zorder=3)
    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.set_xlim(-1, max(len(positions), 1))
    ax.set_ylim(-(tree.height() + 0.2), 0.8)
    ax.axis("off")


# ---------------------------------------------------------------------------
# Example 1: Reference Scenario
# ---------------------------------------------------------------------------
def example_1_reference_scenario():
    """Build the reference tree and report every read operation."""
    print("=" * 60)
    print("Example 1: Reference Scenario")
    print("=" * 60)

    tree = SearchTree.from_iterable(REFERENCE)
    print(f"\n  Inserted:     {REFERENCE}")
    print(f"  size():       {tree.size()}")
    print(f"  smallest():   {tree.smallest()}")
    print(f"  largest():    {tree.largest()}")
    print(f"  count_leaves(): {tree.count_leaves()}")
    print(f"  height():     {tree.height()}")
    print(f"  render():     {tree.render()!r}")

    assert tree.render() == "20 30 40 50 60 70 80 "
    assert tree.count_leaves() == 4

    empty = SearchTree()
    try:
        empty.smallest()
    except EmptyTreeError as exc:
        print(f"  SearchTree().smallest() -> EmptyTreeError: {exc}")

    fig, ax = plt.subplots(figsize=(8, 4.5))
    _draw_tree(ax, tree, "Insertion order 50, 30, 70, 20, 40, 60, 80\nLeaves highlighted",
               highlight=(20, 40, 60, 80))
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_reference_tree.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_reference_tree.png")


# ---------------------------------------------------------------------------
# Example 2: Duplicates and Removal
# ---------------------------------------------------------------------------
def example_2_duplicates_and_removal():
    """Show duplicate rejection and the successor replacement on removal."""
    print("\n" + "=" * 60)
    print("Example 2: Duplicates and Removal")
    print("=" * 60)

    tree = SearchTree.from_iterable(WITH_DUPLICATES)
    print(f"\n  Inserted:     {WITH_DUPLICATES}")
    print(f"  size():       {tree.size()}  (30 and 80 rejected as duplicates)")
    print(f"  add(40):      {tree.add(40)}")

    before = tree.copy()
    removed = tree.remove(30)
    print(f"  remove(30):   {removed}  -> successor 40 takes its place")
    print(f"  size():       {tree.size()}")
    print(f"  contains(30): {tree.contains(30)}")
    print(f"  remove(45):   {tree.remove(45)}  (absent, size stays {tree.size()})")
    print(f"  render():     {tree.render()!r}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 4.5))
    _draw_tree(axes[0], before, "Before remove(30)", highlight=(30, 40))
    _draw_tree(axes[1], tree, "After remove(30)\nNode keeps its slot, value becomes 40",
               highlight=(40,))
    fig.suptitle("Two-Child Removal via In-Order Successor", fontsize=14,
                 fontweight="bold", y=1.02)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_removal.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_removal.png")


# ---------------------------------------------------------------------------
# Example 3: Shape versus Insertion Order
# ---------------------------------------------------------------------------
def example_3_height_vs_order():
    """Compare height under sorted and random insertion orders."""
    print("\n" + "=" * 60)
    print("Example 3: Shape versus Insertion Order")
    print("=" * 60)

    sorted_heights = []
    random_means = []
    random_stds = []
    for n in SIZES:
        sorted_heights.append(SearchTree.from_iterable(range(n)).height())
        heights = [SearchTree.from_iterable(np.random.permutation(n).tolist()).height()
                   for _ in range(TRIALS)]
        random_means.append(np.mean(heights))
        random_stds.append(np.std(heights))
        print(f"  n={n:4d}  sorted height={sorted_heights[-1]:4d}  "
              f"random height={random_means[-1]:6.1f} +/- {random_stds[-1]:.1f}")

    sizes = np.array(SIZES)
    lower_bound = np.ceil(np.log2(sizes + 1))

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].plot(sizes, sorted_heights, "o-", color=COLORS["red"], linewidth=2,
                 label="Sorted insertion")
    axes[0].errorbar(sizes, random_means, yerr=random_stds, fmt="s-",
                     color=COLORS["green"], linewidth=2, capsize=3,
                     label=f"Random insertion (mean of {TRIALS})")
    axes[0].plot(sizes, lower_bound, "--", color=COLORS["dark"], label="ceil(log2(n+1))")
    axes[0].set_xscale("log", base=2)
    axes[0].set_yscale("log", base=2)
    axes[0].set_xlabel("Number of values")
    axes[0].set_ylabel("Height")
    axes[0].set_title("Height Grows Linearly Under Sorted Insertion\nNo rebalancing is performed",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    _draw_tree(axes[1], SearchTree.from_iterable(range(1, 8)), "Sorted insertion 1..7")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_height_vs_order.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_height_vs_order.png")


# ---------------------------------------------------------------------------
# Example 4: Leaf Counts
# ---------------------------------------------------------------------------
def example_4_leaf_counts():
    """Distribution of leaf counts across random insertion orders."""
    print("\n" + "=" * 60)
    print("Example 4: Leaf Counts")
    print("=" * 60)

    n = 127
    counts = [SearchTree.from_iterable(np.random.permutation(n).tolist()).count_leaves()
              for _ in range(TRIALS * 10)]
    print(f"\n  n={n}, trials={len(counts)}")
    print(f"  mean leaves: {np.mean(counts):.1f}  (expected about (n+1)/3 = {(n + 1) / 3:.1f})")
    print(f"  sorted insertion leaves: {SearchTree.from_iterable(range(n)).count_leaves()}")

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.hist(counts, bins=20, color=COLORS["purple"], edgecolor="white")
    ax.axvline((n + 1) / 3, color=COLORS["red"], linestyle="--", label="(n+1)/3")
    ax.axvline((n + 1) / 2, color=COLORS["dark"], linestyle=":", label="Perfectly balanced")
    ax.set_xlabel("Leaf count")
    ax.set_ylabel("Trials")
    ax.set_title(f"Leaf Counts over Random Insertion Orders (n={n})",
                 fontsize=10, fontweight="bold")
    ax.legend(fontsize=9)
    ax.grid(True, alpha=0.3, axis="y")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_leaf_counts.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/04_leaf_counts.png")


# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Combine a title page and every visualization into one PDF."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Search Tree", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "An Unbalanced Binary Search Tree of Distinct Values",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "Values are inserted as new leaves at the slot dictated by ordering.\n"
            "Duplicates are rejected, removal of a two-child node copies the\n"
            "in-order successor's value and unlinks the successor.\n\n"
            "This demo covers:\n"
            "  1. Reference scenario: size, min/max, leaves, render\n"
            "  2. Duplicate rejection and successor-based removal\n"
            "  3. Height under sorted versus random insertion\n"
            "  4. Leaf-count distribution\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.32, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_reference_tree.png": "Example 1: Reference Scenario",
            "02_removal.png": "Example 2: Duplicates and Removal",
            "03_height_vs_order.png": "Example 3: Shape versus Insertion Order",
            "04_leaf_counts.png": "Example 4: Leaf Counts",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Search Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_reference_scenario()
    example_2_duplicates_and_removal()
    example_3_height_vs_order()
    example_4_leaf_counts()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
