"""Food delivery backend: dish catalogue, per-user basket, orders and dish ratings."""
