"""decimath.elementary -- powers, logarithms, roots, trigonometry."""
