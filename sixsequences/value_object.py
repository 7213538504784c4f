# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from itertools import chain


class MetaclassCollectSlots(type):
    """
    Metaclass which concatenates all __slots__ fields
    from the inheritance hierarchy into a single class member
    called _fields (which is also how namedtuple objects expose their
    field names).
    """
    def __init__(cls, *args, **kwargs):
        super(MetaclassCollectSlots, cls).__init__(*args, **kwargs)
        inherited_class_order = reversed(cls.__mro__)
        cls._fields = tuple(
            chain.from_iterable(
                getattr(klass, '__slots__', [])
                for klass in inherited_class_order))


class ValueObject(object, metaclass=MetaclassCollectSlots):
    """
    Base class for small immutable-by-convention records whose fields are
    declared through __slots__. Subclasses get keyword initialization,
    equality, hashing and a readable string representation for free.
    """
    __slots__ = []

    def __init__(self, **kwargs):
        for field_name in self._fields:
            if field_name not in kwargs:
                raise ValueError("Missing argument '%s' to %s.__init__" % (
                    field_name,
                    self.__class__.__name__))
            setattr(self, field_name, kwargs[field_name])

    def _values_generator(self):
        return (getattr(self, name) for name in self._fields)

    @property
    def _values(self):
        return tuple(self._values_generator())

    def __str__(self):
        field_strings = []
        for name, value in zip(self._fields, self._values):
            format_string = "%s='%s'" if isinstance(value, str) else "%s=%s"
            field_strings.append(format_string % (name, value))
        return "%s(%s)" % (
            self.__class__.__name__,
            ", ".join(field_strings))

    def __repr__(self):
        return str(self)

    def __hash__(self):
        return hash(self._values)

    def __eq__(self, other):
        return self.__class__ is other.__class__ and all(
            value_self == value_other
            for (value_self, value_other) in
            zip(self._values_generator(), other._values_generator()))
