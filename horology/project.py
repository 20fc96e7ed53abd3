identity = 'python/horology'
name = 'horology'
abstract = 'Tick counting clock with a bijective Gregorian and UTC calendar mapping.'
icon = '⌛'
study = 'horology'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
