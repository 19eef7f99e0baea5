class Html(str):
    """ Markup produced by the serializer. Concatenating two Html objects returns Html. """

    def __add__(self, other: 'Html') -> 'Html':
        """ Concatenates two Html objects together, returning a new Html object. """
        return Html(str(self) + str(other))
