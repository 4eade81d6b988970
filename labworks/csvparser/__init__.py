"""CSV reader that yields rows as tuples of typed values."""