"""Range minimum query structures over static integer sequences."""