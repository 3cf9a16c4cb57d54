"""exprtree core: errors, expression tree, and the expression language."""
