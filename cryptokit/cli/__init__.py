"""
Command-line front ends for the HMAC and randomness helpers.

  cryptokit-hmac : compute or verify HMAC-SHA256 tags
  cryptokit-rand : print random hex or base64 tokens
"""
