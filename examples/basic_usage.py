"""Basic usage example for quadwarp."""

from quadwarp import get_transform, project, to_css, bounding_box


def main():
    """Warp a 100x100 box onto a skewed quad and read the handles back."""
    reference = [(0, 0), (100, 0), (100, 100), (0, 100)]
    dragged = [(10, 10), (110, 5), (105, 110), (5, 105)]

    # Solve
    print("Solving perspective transform...")
    matrix = get_transform(reference, dragged)
    print(matrix)

    # Render
    print(f"CSS transform: {to_css(matrix)}")
    print(f"Envelope: {bounding_box(dragged)}")

    # Reload
    handles = project(reference, matrix)
    print(f"Restored handles: {[(round(p.x, 6), round(p.y, 6)) for p in handles]}")


if __name__ == "__main__":
    main()
