class chars:
    check = "✓"
    dot = "•"
    dot_hollow = "◦"
    larrow = "◀"
    larrow_hollow = "◁"
    null = "∅"
    rarrow = "▶"
    rarrow_hollow = "▷"
    xmark = "✗"
