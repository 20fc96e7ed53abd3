"""
# Repeatedly print the current date and time every 64 milliseconds.

# Carriage returns will be used to overwrite previous displays.
"""
import sys
import time
from .. import system
from .. import std

def print_utc_timestamp(now=system.utc, calendar=std.utc, sleep=time.sleep):
	try:
		while not None:
			ts = now(calendar)
			st = calendar.to_text(calendar.to_datetime(ts))
			sys.stdout.write(("   " + st + "\r"))
			sys.stdout.flush()
			sleep(0.064)
	except KeyboardInterrupt:
		sys.stdout.write("\r\n")
		sys.exit(0)

if __name__ == '__main__':
	print_utc_timestamp()
