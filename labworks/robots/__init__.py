"""Console game of robots exploring a map, scanning it and collecting items."""