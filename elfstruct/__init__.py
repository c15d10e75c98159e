"""
# elfstruct: ELF headers for humans.

We can define a file format as a way of describing a binary representation of something
digital, where each subcomponent of the file format aims to represent a specific aspect
of the digital artefact.

Here the only operation defined is unpack(): reading the binary data and building
a high-level, read-only, representation of it. A record (Chunk) is a sequence of
fields unpacked one after the other: the way a field is read (its width, its byte
order) can depend on the values of the fields that precede it, indicated
via Dependency and passed explicitly to the field.

If something goes wrong an exception is raised: its type tells the cause and its
"chain" attribute the fields (innermost first) that were being unpacked.
A record can be in one of the following states

 1. INIT
 2. UNPACKING
 3. DONE

"""
