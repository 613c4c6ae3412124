"""Worked lessons on everyday programming concepts."""