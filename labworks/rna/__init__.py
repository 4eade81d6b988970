"""RNA chains stored two bits per nucleotide."""