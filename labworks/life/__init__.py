"""Conway's Game of Life with a command-driven console."""