# Machine word
WORD_SIZE = 4                       # bytes
WORD_MASK = 0xFFFFFFFF

# Instruction layout: [31..22 unused][21..18 opcode][17..0 operand]
OPCODE_SHIFT = 18
OPCODE_BITS = 4
OPERAND_BITS = 18
OPERAND_MASK = (1 << OPERAND_BITS) - 1
INSTRUCTION_BITS = OPCODE_BITS + OPERAND_BITS

# Register file
REGISTER_COUNT = 4
REGISTER_PREFIX = 'r'

# Memory (shared code and data)
MEMORY_SIZE = 64                    # words
LAST_ADDRESS = MEMORY_SIZE - 1

# Compare results held by the flag register
FLAG_UNSET = 0
FLAG_GT = 1
FLAG_EQ = 2
FLAG_LT = 3
