from pixelhex import Axial, PixelHex, dumps_tile

# Silhouette of a small flat-top sprite, rows relative to its center.
samples = [
    (-1, (0, 1)),
    (0, (-1, 2)),
    (1, (-1, 2)),
    (2, (0, 1)),
]

tile = PixelHex.flat(samples)
clicks = [(0, 0), (2, 1), (3, 1), (-2, 1), (1, -2)]


if __name__ == "__main__":
    print("spacing:", tile.horizontal_spacing, tile.vertical_spacing)
    for xy in clicks:
        qr = tile.axial(xy)
        print(xy, "->", qr, "relative", tile.pixel_relative(xy))
    print("ring:", list(Axial(0, 0).circle(1)))
    print(dumps_tile(tile))
