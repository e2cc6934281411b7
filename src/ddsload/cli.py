"""Command-line interface for ddsload"""
import argparse
import sys
import time

import imageio.v3 as iio

from .config import DecodeOptions
from .dds import DDS
from .errors import DDSError
from .image import surface_to_image
from .log import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ddsload',
        description='Decode DDS (DirectDraw Surface) texture files into their surfaces',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ddsload texture.dds                               # Display DDS file info
  ddsload texture.dds --surfaces                    # List every decoded surface
  ddsload texture.dds --flip -o output.png          # Export the top level, flipped for OpenGL
  ddsload texture.dds -o output.png -s 1            # Export surface 1 (mip level 1 of a 2D texture)
  ddsload array.dds -o output.png -r 2              # Export the first surface of array element 2
  ddsload volume.dds -o output.png -d 5             # Export depth slice 5 of a volume texture
        """
    )

    parser.add_argument('input', help='Input DDS file path')
    parser.add_argument('--flip', action='store_true',
                        help='Flip every surface vertically while decoding')
    parser.add_argument('--strict', action='store_true',
                        help='Reject headers missing the flags required by the format documentation')
    parser.add_argument('--surfaces', action='store_true',
                        help='List every decoded surface')
    parser.add_argument('-o', '--output', help='Output image file path (e.g., output.png)')
    parser.add_argument('-r', '--resource', type=int, default=0,
                        help='Texture resource (array element) to export (default: 0)')
    parser.add_argument('-s', '--surface', type=int, default=0,
                        help='Surface index within the resource, faces first then mip levels (default: 0)')
    parser.add_argument('-d', '--depth', type=int, default=0,
                        help='Depth slice index for volume textures (default: 0)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def export_surface(dds: DDS, output: str, resource: int, surface_index: int, depth_index: int) -> None:
    """Write one surface of a decoded file to an image file"""
    if not 0 <= resource < len(dds.textures):
        raise ValueError(f"Resource index {resource} out of range (resources: {len(dds.textures)})")
    texture = dds.textures[resource]
    if not 0 <= surface_index < len(texture):
        raise ValueError(f"Surface index {surface_index} out of range (surfaces: {len(texture)})")
    surface = texture[surface_index]

    print(f"\nConverting to image (resource {resource}, surface {surface_index}, "
          f"{surface.type.name} level {surface.level}, depth {depth_index})...")

    start_convert = time.perf_counter()
    image_array = surface_to_image(surface, dds.format_d3d, dds.format_dxgi, depth_index)
    convert_time = time.perf_counter() - start_convert

    start_save = time.perf_counter()
    iio.imwrite(output, image_array)
    save_time = time.perf_counter() - start_save

    channels = image_array.shape[2] if image_array.ndim == 3 else 1
    print(f"Saved to: {output}")
    print(f"Image size: {image_array.shape[1]}x{image_array.shape[0]}")
    print(f"Image format: {image_array.dtype} ({channels} channels)")
    print(f"Conversion time: {convert_time*1000:.2f} ms")
    print(f"Save time: {save_time*1000:.2f} ms")


def main(argv=None) -> int:
    """Command-line interface for ddsload"""
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")

    options = DecodeOptions(vertical_flip=args.flip, strict=args.strict)
    try:
        start_decode = time.perf_counter()
        dds = DDS.from_file(args.input, options)
        decode_time = time.perf_counter() - start_decode
    except FileNotFoundError:
        print(f"Error: File '{args.input}' not found")
        return 1
    except DDSError as e:
        print(f"Error parsing DDS file: {e}")
        return 1

    print(dds)
    print(f"  Decode time: {decode_time*1000:.2f} ms")

    if args.surfaces:
        print("\nSurfaces:")
        for resource, surface in dds.iter_surfaces():
            print(f"  [{resource}] {surface.type.name} level {surface.level}: "
                  f"{surface.width}x{surface.height}x{surface.depth}, {surface.size} bytes")

    if args.output:
        try:
            export_surface(dds, args.output, args.resource, args.surface, args.depth)
        except NotImplementedError as e:
            print(f"Cannot convert to image: {e}")
            return 1
        except ValueError as e:
            print(f"Error: {e}")
            return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
