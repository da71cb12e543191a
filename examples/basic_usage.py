"""Basic usage example for seqlist."""

from seqlist import ABSENT, SequentialLinkedList


def main() -> None:
    """Demonstrate the list as a stack, a queue and an indexed sequence."""
    print("=== Stack (push_back / pop_back) ===\n")
    stack = SequentialLinkedList[str]()
    stack.push_back("first").push_back("second").push_back("third")
    print(f"Stack: {stack!r}")
    while (item := stack.pop_back()) is not ABSENT:
        print(f"  Popped {item}")
    print(f"Empty pop returns: {stack.pop_back()!r}\n")

    print("=== Queue (push_back / pop_front) ===\n")
    queue = SequentialLinkedList[dict]()
    queue.push_back({"action": "send_email", "to": "user@example.com"})
    queue.push_back({"action": "process_data", "records": 100})
    while queue:
        print(f"  Processing {queue.pop_front()}")
    print()

    print("=== Indexed access ===\n")
    numbers = SequentialLinkedList[int]()
    for i in range(1, 6):
        numbers.push_back(i * 10)
    print(f"Start:      {numbers!r}")
    numbers.set(2, 99)
    print(f"set(2, 99): {numbers!r}")
    print(f"get(4):     {numbers.get(4)}")
    print(f"get(9):     {numbers.get(9)!r}")
    print(f"remove_at(1) -> {numbers.remove_at(1)}, now {numbers!r}")
    numbers.reverse()
    print(f"Reversed:   {numbers!r}")


if __name__ == "__main__":
    main()
