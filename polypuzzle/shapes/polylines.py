from collections import deque


# append src to one end of dest when they share an end point
def try_merge(dest, src):
    prev_len = len(dest)

    if dest[-1] == src[0]:
        dest.extend(list(src)[1:])
    elif dest[-1] == src[-1]:
        dest.extend(list(reversed(src))[1:])
    elif dest[0] == src[0]:
        dest.extendleft(list(src)[1:])
    elif dest[0] == src[-1]:
        dest.extendleft(list(reversed(src))[1:])

    return prev_len != len(dest)


class PathGroup:
    """Connected runs of segments.

    Every segment starts as its own path and is merged with any path sharing
    one of its end points, so a segment bridging two runs joins them.
    """

    def __init__(self):
        self.paths = []

    def put(self, segment):
        self.paths.append(deque([segment.p, segment.q]))
        self.merge_once()
        self.merge_once()

    def merge_find_index(self):
        for i in range(len(self.paths)):
            for j in range(i + 1, len(self.paths)):
                if try_merge(self.paths[i], self.paths[j]):
                    return j
        return None

    def merge_once(self):
        idx = self.merge_find_index()
        if idx is not None:
            del self.paths[idx]

    @classmethod
    def from_segments(cls, segments):
        group = cls()
        for segment in segments:
            group.put(segment)
        return group


def boundary_chains(segments):
    return [list(path) for path in PathGroup.from_segments(segments).paths]
