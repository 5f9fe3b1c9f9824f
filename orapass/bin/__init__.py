"""
Console-script collection package.

Contents:

 orapass
  Print the password of the first matching orapass file entry.
"""
