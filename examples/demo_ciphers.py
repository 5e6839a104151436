"""
classical_ciphers — Live Demo: Caesar + Vigenère
================================================
Run:  python examples/demo_ciphers.py

Encrypts and decrypts a message with each tier, then drives the same
message through a dispatcher switching modes, the way the page buttons
did.
"""

import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classical_ciphers.tiers.tier1_caesar   import CaesarCipher
from classical_ciphers.tiers.tier2_vigenere import VigenereCipher
from classical_ciphers.dispatcher           import CipherDispatcher, CipherMode
from classical_ciphers.result               import Direction

LINE = "═" * 70
MSG  = "Attack At Dawn! Meet at the old mill, 6 o'clock."

def header(tier, name):
    print(f"\n{LINE}")
    print(f"  Tier {tier} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  classical_ciphers — Caesar + Vigenère Demo")
print(LINE)
print(f"  Message: {MSG}\n")

# ── TIER 1 ───────────────────────────────────────────────────────────────────
header(1, "MONOALPHABETIC — Caesar shift")
for shift in (3, -1, 29):
    ct = CaesarCipher.encrypt(MSG, shift)
    ok(f"Shift {shift:>3}", ct)
ct = CaesarCipher.encrypt(MSG, 3)
ok("Decrypted", CaesarCipher.decrypt(ct, 3))
ok("Shift 3 == shift 29", CaesarCipher.encrypt(MSG, 3) == CaesarCipher.encrypt(MSG, 29))

# ── TIER 2 ───────────────────────────────────────────────────────────────────
header(2, "POLYALPHABETIC — Vigenère")
ct = VigenereCipher.encrypt(MSG, "lemon")
ok("Key", "lemon")
ok("Encrypted", ct)
ok("Decrypted", VigenereCipher.decrypt(ct, "lemon"))
res = VigenereCipher.transform(MSG, "ab3")
ok("Invalid key 'ab3'", f"ok={res.ok}, text unchanged={res.text == MSG}")

# ── DISPATCHER ───────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  Dispatcher — mode switching")
print(LINE)
d = CipherDispatcher()
for mode, param in ((CipherMode.CAESAR, "3"), (CipherMode.VIGENERE, "lemon")):
    d.set_mode(mode)
    for direction, text in ((Direction.ENCRYPT, MSG), (Direction.DECRYPT, d.encrypt(MSG, param))):
        out = d.transform(text, param, direction).text
        ok(f"{mode.value:<8} {d.status_label(direction)}", out)

print(f"\n{LINE}\n")
