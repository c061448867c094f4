# protocol_constants.py

PRIME_BIT_SIZE = 512          # Bit size of each prime factor
ELEMENT_BIT_SIZE = 1024       # Bit size of the sampled group element
P_MOD8 = 3                    # p = 3 (mod 8), 2 is a non-residue mod p
Q_MOD8 = 7                    # q = 7 (mod 8), 2 is a residue mod q
PRIMALITY_ROUNDS = 10         # Rounds for the probabilistic primality test
MAX_READ_BYTES = 2048         # Size of the random read buffer
VERIFICATION_ROUNDS = 1_000_000  # Default number of benchmark verifications
