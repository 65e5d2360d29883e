"""Test cases for media lookups."""

import unittest

from docx_reader.options import ParseOptions
from docx_reader.parser.media_extractor import MediaResolver, sniff_image_type
from docx_reader.parser.rels_parser import Relationship, Relationships

PNG_DATA = b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x01\x00\x00\x00\x01\x00'
JPEG_DATA = b'\xff\xd8\xff\xe0\x00\x10JFIF'


class MediaResolverTest(unittest.TestCase):
    """Resolve drawings by numeric id and by relationship id."""

    def setUp(self):
        """Set up test fixtures."""
        self.media = {'image3.png': PNG_DATA, 'photo.jpeg': JPEG_DATA}
        self.relationships = Relationships({
            'rId7': Relationship(r_id='rId7', target='media/photo.jpeg'),
            'rId8': Relationship(r_id='rId8', target='media/missing.png'),
        })
        self.resolver = MediaResolver(self.media, self.relationships)

    def test_drawing_id_uses_legacy_file_name(self):
        self.assertEqual(self.resolver.resolve_drawing_id('3'), PNG_DATA)
        self.assertIsNone(self.resolver.resolve_drawing_id('4'))

    def test_legacy_name_pattern_is_configurable(self):
        resolver = MediaResolver(
            {'pic3.jpeg': JPEG_DATA},
            self.relationships,
            ParseOptions(legacy_image_prefix='pic', legacy_image_extension='.jpeg'),
        )
        self.assertEqual(resolver.resolve_drawing_id('3'), JPEG_DATA)

    def test_embed_resolves_through_relationships(self):
        self.assertEqual(self.resolver.resolve_embed('rId7'), JPEG_DATA)

    def test_embed_misses_are_none(self):
        self.assertIsNone(self.resolver.resolve_embed('rId8'))
        self.assertIsNone(self.resolver.resolve_embed('rId404'))

    def test_sniff_image_type(self):
        test_cases = [
            (PNG_DATA, 'image/png'),
            (JPEG_DATA, 'image/jpeg'),
            (b'GIF89a....', 'image/gif'),
            (b'unknown', 'application/octet-stream'),
        ]
        for data, expected_type in test_cases:
            self.assertEqual(sniff_image_type(data), expected_type)


if __name__ == '__main__':
    unittest.main()
