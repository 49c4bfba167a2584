import time

from nctcdf import noncentral_t_cdf, reference_values


def main():
    timestamp()

    print("      DF  LAMBDA       X  CDF (tabulated)     CDF (computed)      DIFF")
    for df, lam, x, expected in reference_values():
        computed = noncentral_t_cdf(x, df, lam).value
        print(
            f"  {df:6d}  {lam:6.2f}  {x:6.2f}  {expected:18.12f}  "
            f"{computed:18.12f}  {abs(computed - expected):.2e}"
        )

    timestamp()


def timestamp():
    print(time.strftime("%d %B %Y %I:%M:%S %p"))


if __name__ == "__main__":
    main()
