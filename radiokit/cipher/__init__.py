"""XOR keys used by radio firmware images."""