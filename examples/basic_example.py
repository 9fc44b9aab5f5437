"""
Basic example of formatting, serializing and measuring coordinates.
"""

from geocoord import Coordinate, CoordinateList, read, write


def main():
    print("=" * 80)
    print("geocoord - Basic Example")
    print("=" * 80)

    # Create a coordinate from degrees, minutes and seconds
    coord = Coordinate()
    coord.set_dms(0, 10, 20.8, True, 30, 40, 50.9, False)

    # Create a route
    route = CoordinateList([
        Coordinate(1.0, 1.0),
        Coordinate(-2.4, 1.5),
        Coordinate(-3.7, 2.2),
        Coordinate(-2.0, -0.5),
    ])

    print("\nString formatting:")
    print(f"D:   {coord:D}")
    print(f"DM:  {coord:DM}")
    print(f"DMS: {coord:DMS}")
    print(f"ISO: {coord:ISO}")

    print("\n" + "-" * 80)
    print("Serialized:")
    single = write(coord)
    many = write(route)
    print(f"Single coordinate: {single}")
    print(f"Coordinate list:   {many}")

    print("\n" + "-" * 80)
    print("Deserialized:")
    restored = read(single).unwrap()
    print(f"Single coordinate: {restored}")
    print(f"Latitude:  {restored.lat_deg:.6f}°")
    print(f"Longitude: {restored.lon_deg:.6f}°")
    for point in read(many, CoordinateList).unwrap():
        print(f"  {point}")

    print("\n" + "-" * 80)
    print(f"Route length: {float(route.path_length()) / 1000:.2f} km")

    print("\n" + "=" * 80)
    print("Example completed!")
    print("=" * 80)


if __name__ == "__main__":
    main()
