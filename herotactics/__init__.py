"""Decision engine for a hero on a square, turn-based battle grid."""
