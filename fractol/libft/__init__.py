"""Small character, number, string, byte-buffer and linked-list helpers."""