"""
# RD to ETRS89 Example

An example of converting Dutch national grid coordinates to ETRS89 with rdnap
"""


def main():
    """
    The simplest way to convert a coordinate is the `from_rd` function.
    It takes the RD x and y coordinates in kilometers and, optionally, the height above NAP in meters:
    """

    from rdnap import from_rd

    lat, lon, h = from_rd(155.000, 463.000)
    print(lat, lon, h)

    """
    The RD origin, the church tower of Amersfoort, ends up at about 52.1552 N, 5.3872 E.
    Notice that the height is about 43 meters even though we passed 0: the input is a height above NAP,
    while the output is a height above the ETRS89 ellipsoid.

    Coordinates outside the area the transformation was made for are rejected:
    """

    from rdnap import InvalidArgument, try_from_rd

    try:
        from_rd(400, 463)
    except InvalidArgument as e:
        print(e.coordinate, e.value, e.valid_range)

    """
    If you'd rather not deal with exceptions, `try_from_rd` returns a result object instead:
    """

    result = try_from_rd(155, 700)
    if result.is_failure():
        print(f"could not convert: {result.error}")

    """
    Most Dutch datasets give RD coordinates in meters. 
    To convert a whole table at once, load it into a `Survey` and use a transformer:
    """

    import pandas as pd

    from rdnap.constructs.survey import Survey

    df = pd.DataFrame(
        {
            "rd_x": [121687.0, 92565.0, 176331.0],
            "rd_y": [487484.0, 437428.0, 317462.0],
            "nap": [0.0, -2.0, 49.0],
        },
        index=["amsterdam", "rotterdam", "maastricht"],
    )
    survey = Survey.from_dataframe(
        df, x_column="rd_x", y_column="rd_y", h_column="nap", kilometers=False
    )

    from rdnap.transformers.approximate import ApproximateTransformer

    transformer = ApproximateTransformer()
    transform_result = transformer.transform_survey(survey)

    """
    The dataframe index is used as the coordinate id, so results can be joined back to the input:
    """

    result_df = transform_result.to_dataframe()
    print(result_df.head())

    """
    The geodataframe version is in ETRS89 (EPSG:4258) and can be written to any format geopandas supports,
    or reprojected for plotting on a web map:
    """

    result_gdf = transform_result.to_geodataframe()
    print(result_gdf.to_crs("EPSG:3857").head())

    """
    Single coordinates can be reprojected as well:
    """

    point = transform_result.coordinates[0].project("EPSG:3857")
    print(point)


if __name__ == "__main__":
    main()
