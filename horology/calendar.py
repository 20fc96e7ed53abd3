"""
# Cycle tree address resolution.

# A calendar cycle is a tree of `(title, repeat, sub)` nodes whose leaves hold the
# lengths of the months of a year. &aggregate annotates every node with the months
# and days of a single repetition and of all of its repetitions; &resolve then maps
# a day address onto a month address, or the reverse, by descending the tree
# instead of iterating over years.

# [ Elements ]
# /by_days/
	# Selectors resolving a day address into a month address.
# /by_months/
	# Selectors resolving a month address into a day address.
"""
import bisect
import operator
import itertools
import collections

#: Annotated cycle node; &fragment and &totals are `(months, days)` pairs.
Node = collections.namedtuple('Node', ('title', 'repeat', 'sub', 'fragment', 'totals'))

#: Result of &resolve.
Resolution = collections.namedtuple('Resolution', ('cycles', 'address', 'remainder', 'span'))

by_days = (operator.itemgetter(1), operator.itemgetter(0))
by_months = (operator.itemgetter(0), operator.itemgetter(1))

def aggregate(node, accumulate=itertools.accumulate, isinstance=isinstance, int=int):
	"""
	# Construct the &Node tree of the unannotated &node.

	# Leaves are given the month and day boundaries of a single year as their &sub:
	# `((0, 1, ..., 12), (0, 31, 59, ...))`.
	"""
	title, repeat, sub = node

	if isinstance(sub[0], int):
		boundaries = (tuple(range(len(sub) + 1)), (0,) + tuple(accumulate(sub)))
		fragment = (len(sub), boundaries[1][-1])
		return Node(title, repeat, boundaries, fragment, (repeat * fragment[0], repeat * fragment[1]))

	children = tuple(map(aggregate, sub))
	months = sum(x.totals[0] for x in children)
	days = sum(x.totals[1] for x in children)
	return Node(title, repeat, children, (months, days), (repeat * months, repeat * days))

def _descend(root, address, select_in, select_out):
	# Locate the leaf holding &address; returns the leaf, the output offset of its
	# first repetition, and the address relative to that repetition.
	offset = 0
	node = root
	while not isinstance(node.sub[0][0], int):
		for child in node.sub:
			total = select_in(child.totals)
			if address < total:
				repetitions, address = divmod(address, select_in(child.fragment))
				offset += repetitions * select_out(child.fragment)
				node = child
				break
			address -= total
			offset += select_out(child.totals)
		else:
			raise ValueError("address exceeds the cycle")

	return node, offset, address

def resolve(selectors, address, root, bisect_right=bisect.bisect_right):
	"""
	# Resolve the &address of one unit into the other using the aggregated &root.

	# [ Parameters ]
	# /selectors/
		# A pair of functions selecting the input and output unit from
		# `(months, days)` pairs; &by_days or &by_months.
	# /address/
		# The input address. Negative addresses resolve into prior cycles.
	# /root/
		# A tree produced by &aggregate.

	# [ Returns ]
	# A &Resolution: the number of whole cycles preceding the address, the output
	# address within the cycle, the part of the input not consumed by it (the day
	# of the month when resolving days), and the output span of the final part
	# (the days of the month when resolving months).
	"""
	select_in, select_out = selectors
	cycles, address = divmod(address, select_in(root.totals))

	leaf, offset, address = _descend(root, address, select_in, select_out)
	inputs = select_in(leaf.sub)
	outputs = select_out(leaf.sub)
	i = bisect_right(inputs, address) - 1

	return Resolution(
		cycles,
		offset + outputs[i],
		address - inputs[i],
		outputs[i+1] - outputs[i],
	)
