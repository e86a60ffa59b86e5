from packedbits import BitVector


def main():
    bits = BitVector.from_bit_string("10010")
    print(bits)  # 10010

    bits.apply_complement()
    print(bits)  # 01101

    bits.apply_xor(BitVector.from_iterable([True, False, False, False, True]))
    print(bits)  # 11100

    bits[4] = True
    print(bits)  # 11101

    print("".join(f"{index}:{int(value)};" for index, value in bits))
    print(bits.to_json())  # [true,true,true,false,true]

    bits = BitVector.from_bit_string("1100000000000010")
    print(bits.next_set_bit(4))  # 14

    for padding in range(2, 30):
        prefix = "10".ljust(padding, "0")
        bits = BitVector.from_bit_string(prefix + "100")
        print(prefix, "--", bits.next_set_bit(2))


if __name__ == "__main__":
    main()
