from pysteamtoolbox.classes import class_dic

def validate_methods(names, variables):
    for m, method in enumerate(names):
        if type(variables[m]) == str:
            try:
                variables[m] = class_dic[method][variables[m].upper()]
            except KeyError:
                raise ValueError(f"An incorrect method was specified: '{variables[m]}' is not a valid {method}")
    if len(variables) == 1:
        return variables[0]
    else:
        return variables
