"""Console front-end for SyntaxSakura."""
